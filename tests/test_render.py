"""Tests for the terminal, text and JSON renderers."""

import json

from zscreen.core.cell import Cell, Style
from zscreen.core.color import PALETTE, Theme, ZColor
from zscreen.config import Preferences
from zscreen.protocol import PrintText, StatusUpdate
from zscreen.render import JsonRenderer, TerminalRenderer, TextRenderer, render_screen
from zscreen.render.layout import screen_rows
from zscreen.screen.model import ScreenModel
from zscreen.screen.status import StatusLine
from zscreen.session import GameSession


def sample_screen() -> ScreenModel:
    screen = ScreenModel(cols=20, rows=10)
    screen.split(1)
    screen.select_window(1)
    screen.set_style(Style.REVERSE)
    screen.print(" West of House")
    screen.select_window(0)
    screen.print("You are standing\nin an open field.")
    return screen


class TestLayout:
    def test_overlay_before_lower_window(self) -> None:
        rows = screen_rows(sample_screen())
        assert len(rows) == 3
        assert ''.join(c.char for c in rows[0]).startswith(" West of House")

    def test_status_row_first(self) -> None:
        rows = screen_rows(sample_screen(), StatusLine("Kitchen", "0/1"))
        assert len(rows) == 4
        assert all(cell.has_style(Style.REVERSE) for cell in rows[0])
        assert ''.join(c.char for c in rows[0]).endswith("0/1")


class TestTextRenderer:
    def test_render_screen(self) -> None:
        text = TextRenderer().render_screen(sample_screen())
        assert text == " West of House\nYou are standing\nin an open field."

    def test_preserve_whitespace(self) -> None:
        text = TextRenderer(preserve_whitespace=True).render(sample_screen().window1)
        assert text == " West of House      "

    def test_trailing_blank_lines_dropped(self) -> None:
        screen = ScreenModel(cols=10)
        screen.print("hi\n\n")
        assert TextRenderer().render(screen.window0) == "hi"


class TestTerminalRenderer:
    def test_plain_row(self) -> None:
        theme = Theme(default_fg="#ffffff", default_bg="#000000")
        out = TerminalRenderer(theme, reset_at_end=False).render_row([Cell('h'), Cell('i'), Cell(), Cell()])
        assert out == "\x1b[0;38;2;255;255;255;48;2;0;0;0mhi\x1b[0m"

    def test_sgr_only_on_change(self) -> None:
        row = [Cell('a'), Cell('b', style=Style.BOLD), Cell('c', style=Style.BOLD)]
        out = TerminalRenderer().render_row(row)
        assert out.count("\x1b[0;") == 2
        assert "\x1b[0;1;38;2" in out

    def test_reverse_swaps_at_render(self) -> None:
        theme = Theme(default_fg="#ffffff", default_bg="#000000")
        out = TerminalRenderer(theme).render_row([Cell('x', fg=ZColor.RED, style=Style.REVERSE)])
        assert "38;2;0;0;0;48;2;255;82;82" in out
        assert PALETTE[ZColor.RED] == "#ff5252"

    def test_blank_row_is_empty(self) -> None:
        assert TerminalRenderer().render_row([Cell(), Cell()]) == ""

    def test_render_screen_resets(self) -> None:
        out = TerminalRenderer().render_screen(sample_screen())
        assert out.endswith("\x1b[0m")
        assert "West of House" in out


class TestJsonRenderer:
    def test_runs(self) -> None:
        row = [Cell('a'), Cell('b'), Cell('c', fg=ZColor.RED), Cell(), Cell()]
        runs = JsonRenderer().row_runs(row)
        assert runs == [
            {"chars": "ab", "fg": 1, "bg": 1, "style": 0},
            {"chars": "c", "fg": 3, "bg": 1, "style": 0},
        ]

    def test_untrimmed_keeps_blanks(self) -> None:
        runs = JsonRenderer(trim=False).row_runs([Cell('a'), Cell()])
        assert runs == [{"chars": "a ", "fg": 1, "bg": 1, "style": 0}]

    def test_render_screen(self) -> None:
        data = json.loads(JsonRenderer().render_screen(sample_screen(), StatusLine("Field", "3/4")))
        assert data["status"] == {"location": "Field", "right": "3/4"}
        assert data["window1"]["height"] == 1
        assert data["window1"]["rows"][0]["runs"][0]["style"] == int(Style.REVERSE)
        assert data["window0"]["height"] == 2
        assert data["window0"]["rows"][1]["runs"][0]["chars"] == "in an open field."

    def test_render_single_grid_compact(self) -> None:
        out = JsonRenderer(indent=None).render(sample_screen().window0)
        assert json.loads(out)["height"] == 2
        assert "\n" not in out


class TestRenderScreen:
    def test_session_includes_status_line(self) -> None:
        session = GameSession(version=3, prefs=Preferences())
        session.apply(StatusUpdate("Cellar", "2/9"))
        session.apply(PrintText("Dark."))
        text = render_screen(session, TextRenderer())
        lines = text.split("\n")
        assert lines[0].startswith("Cellar")
        assert lines[0].endswith("2/9")
        assert lines[1] == "Dark."

    def test_bare_screen_model(self) -> None:
        assert render_screen(sample_screen(), TextRenderer()).startswith(" West of House")
