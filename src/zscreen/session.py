"""
GameSession - the context object shared by the engine and the front end.

The engine drives the session through command()/handle() and the read
requests; the front end reads the ScreenModel, answers render waits with
signal_render_complete(), and submits input through session.input.

Commands are applied to the screen strictly in the order the engine
emits them. Only overlay prints and window splits make the engine wait
for the front end to commit the update; everything else is
fire-and-forget.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, Protocol, assert_never

from zscreen.config import Preferences, get_save_dir, load_preferences
from zscreen.core.constants import CAPABILITY_FLAGS, GAME_OVER_BANNER, SCREEN_COLS, SCREEN_ROWS
from zscreen.errors import SessionClosedError
from zscreen.input.coordinator import InputCoordinator
from zscreen.protocol.codec import decode_command
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
    needs_render_sync,
)
from zscreen.protocol.gate import RenderSyncGate
from zscreen.saves.history import SaveNameHistory
from zscreen.saves.store import SaveManager, SavePrompt
from zscreen.screen.model import ScreenModel
from zscreen.screen.status import StatusLine

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    """Front end that shows the screen model."""

    def commit(self, session: GameSession, command: Command) -> None:
        """
        Called after each command is applied.

        For render-sensitive commands the presenter must eventually call
        session.signal_render_complete() once the update is on screen.
        """
        ...


class AutoCommitPresenter:
    """Headless presenter: every update counts as committed one loop tick later."""

    def commit(self, session: GameSession, command: Command) -> None:
        if needs_render_sync(command):
            asyncio.get_running_loop().call_soon(session.signal_render_complete)


class GameSession:
    """One game's screen, input and save state."""

    def __init__(
        self,
        presenter: Presenter | None = None,
        *,
        cols: int = SCREEN_COLS,
        rows: int = SCREEN_ROWS,
        version: int = 5,
        prefs: Preferences | None = None,
        save_prompt: SavePrompt | None = None,
        save_dir: Path | None = None,
    ):
        self.screen = ScreenModel(cols=cols, rows=rows, version=version)
        self.gate = RenderSyncGate()
        self.input = InputCoordinator(self.screen)
        self.presenter = presenter or AutoCommitPresenter()
        self.prefs = prefs if prefs is not None else load_preferences()
        self.save_names = SaveNameHistory(self.prefs)
        self.saves = SaveManager(save_dir or get_save_dir(), self.save_names, save_prompt)
        self.status: StatusLine | None = None
        self.closed = False
        self._engine_task: asyncio.Task[Any] | None = None

    @property
    def version(self) -> int:
        return self.screen.version

    def flags1(self) -> int:
        """Capabilities the interpreter advertises to the engine."""
        return CAPABILITY_FLAGS

    def header_dimensions(self) -> tuple[int, int]:
        """(rows, cols) the engine should write into its header."""
        return self.screen.rows, self.screen.cols

    # ----- display commands -----

    def apply(self, command: Command) -> None:
        """Apply one command to the screen model."""
        logger.debug("Applying %r", command)
        match command:
            case PrintText(text=text, window=window):
                self.screen.print(text, window)
            case SplitWindow(lines=lines):
                self.screen.split(lines)
            case SetWindow(id=window_id):
                self.screen.select_window(window_id)
            case SetCursor(line=line, column=column):
                self.screen.set_cursor(line, column)
            case SetTextStyle(style=style):
                self.screen.set_style(style)
            case SetColor(foreground=fg, background=bg):
                self.screen.set_color(fg, bg)
            case ClearScreen(window=window):
                self.screen.clear_screen(window)
            case StatusUpdate(location=location, formatted_right=right):
                if self.version == 3:
                    self.status = StatusLine(location, right)
            case EraseLine():
                self.screen.erase_to_end_of_line()
            case _:
                assert_never(command)

    async def command(self, command: Command) -> None:
        """Apply a command and, if it is render-sensitive, wait for the commit."""
        self._check_open()
        token = self.gate.begin_wait() if needs_render_sync(command) else None
        self.apply(command)
        self.presenter.commit(self, command)
        if token is not None:
            await token

    def signal_render_complete(self) -> None:
        """Front end: the last render-sensitive update is on screen."""
        self.gate.signal_complete()

    # ----- engine requests -----

    def get_cursor(self) -> dict[str, int]:
        row, column = self.screen.get_cursor()
        return {"row": row, "column": column}

    async def read_line(self) -> str:
        self._check_open()
        return await self.input.read_line()

    async def read_char(self) -> str:
        self._check_open()
        return await self.input.read_char()

    async def save(self, data: bytes) -> bool:
        return await self.saves.save(data)

    async def restore(self) -> bytes | None:
        return await self.saves.restore()

    def quit(self) -> None:
        self.screen.append_to_window0(GAME_OVER_BANNER)
        self.input.mark_quit()

    async def handle(self, raw: dict[str, Any]) -> Any:
        """Answer one dictionary-shaped engine request."""
        self._check_open()
        match raw.get("command"):
            case "read":
                return await self.read_line()
            case "read_char":
                return await self.read_char()
            case "get_cursor":
                return self.get_cursor()
            case "save":
                return await self.save(bytes(raw.get("file_data") or b""))
            case "restore":
                return await self.restore()
            case "quit":
                self.quit()
                return None

        command = decode_command(raw)
        if command is not None:
            await self.command(command)
        return None

    # ----- lifecycle -----

    def run_engine(self, engine: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Start the engine coroutine; the session is marked quit when it ends."""
        self._check_open()
        task = asyncio.get_running_loop().create_task(engine)
        task.add_done_callback(self._on_engine_done)
        self._engine_task = task
        return task

    def _on_engine_done(self, task: asyncio.Task[Any]) -> None:
        if not task.cancelled() and task.exception() is not None:
            error = task.exception()
            logger.error("Engine stopped with an error: %s", error, exc_info=error)
            self.screen.append_to_window0(f"Engine error: {error}\n")
        self.input.mark_quit()

    def close(self) -> None:
        """Release any blocked engine call and stop the engine."""
        if self.closed:
            return
        self.closed = True
        self.gate.cancel()
        self.input.cancel()
        if self._engine_task is not None and not self._engine_task.done():
            self._engine_task.cancel()
        logger.debug("Session closed")

    def _check_open(self) -> None:
        if self.closed:
            raise SessionClosedError("session is closed")
