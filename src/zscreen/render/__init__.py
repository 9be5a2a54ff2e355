"""Renderers for outputting the screen to various formats."""

from zscreen.render.json_format import JsonRenderer
from zscreen.render.layout import render_screen
from zscreen.render.terminal import TerminalRenderer
from zscreen.render.text import TextRenderer

__all__ = ["JsonRenderer", "TerminalRenderer", "TextRenderer", "render_screen"]
