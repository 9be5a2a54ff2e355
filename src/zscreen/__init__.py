"""
zscreen: screen model for text-adventure interpreters

Implements the two-window display protocol a story-file engine talks to:
a scrolling lower window, a fixed-height upper overlay, per-window cursor
and text attributes, and the engine/UI rendezvous for render-sensitive
updates and player input.

Quick Start:
    >>> import asyncio
    >>> from zscreen import GameSession, PrintText
    >>> async def demo():
    ...     session = GameSession()
    ...     await session.command(PrintText("West of House\\n"))
    ...     return session.screen.window_text(0)[0].rstrip()
    >>> asyncio.run(demo())
    'West of House'

Features:
    - Lower (scrolling) and upper (overlay) windows backed by cell grids
    - Deferred overlay shrink and duplicate quote-box suppression
    - Render and input rendezvous between engine and front end (asyncio)
    - Chained commands and input history
    - Save-name history with overwrite confirmation
    - Render to terminal (24-bit ANSI), plain text or JSON
"""

__version__ = "0.1.0"

# Core types
from zscreen.core.cell import Cell, Style
from zscreen.core.color import Theme, ZColor
from zscreen.core.grid import Grid
from zscreen.core.window import WindowState

# Screen
from zscreen.screen.model import ScreenModel

# Protocol
from zscreen.protocol.commands import (
    ClearScreen,
    Command,
    EraseLine,
    PrintText,
    SetColor,
    SetCursor,
    SetTextStyle,
    SetWindow,
    SplitWindow,
    StatusUpdate,
)
from zscreen.protocol.gate import RenderSyncGate

# Input and saves
from zscreen.input.coordinator import EngineState, InputCoordinator
from zscreen.saves.history import SaveNameHistory

# Session
from zscreen.session import AutoCommitPresenter, GameSession

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Style",
    "Theme",
    "ZColor",
    "Grid",
    "WindowState",
    # Screen
    "ScreenModel",
    # Protocol
    "ClearScreen",
    "Command",
    "EraseLine",
    "PrintText",
    "SetColor",
    "SetCursor",
    "SetTextStyle",
    "SetWindow",
    "SplitWindow",
    "StatusUpdate",
    "RenderSyncGate",
    # Input and saves
    "EngineState",
    "InputCoordinator",
    "SaveNameHistory",
    # Session
    "AutoCommitPresenter",
    "GameSession",
]
