"""Routes player input to the engine's pending line/char requests."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from enum import Enum, auto

from zscreen.errors import InputNotPendingError
from zscreen.input.history import InputHistory
from zscreen.input.keys import Key, zscii_for_key
from zscreen.screen.model import ScreenModel

logger = logging.getLogger(__name__)


class EngineState(Enum):
    """What the engine is currently doing, from the UI's point of view."""
    RUNNING = auto()
    NEEDS_LINE = auto()
    NEEDS_CHAR = auto()
    QUIT = auto()


def split_commands(text: str) -> list[str]:
    """Split chained commands ("open mailbox.take leaflet") on '.'."""
    return [part.strip() for part in text.split('.') if part.strip()]


class InputCoordinator:
    """
    Rendezvous between the engine's input requests and the player.

    The engine awaits read_line()/read_char(); the UI answers with
    submit_line()/submit_char(), each of which returns once the engine
    has run up to its next input request (or quit). Chained commands are
    fed one at a time while the engine keeps asking for lines.
    """

    def __init__(self, screen: ScreenModel, echo: bool = True) -> None:
        self.screen = screen
        self.echo = echo
        self.history = InputHistory()
        self.state = EngineState.RUNNING
        self._request: asyncio.Future[str] | None = None
        self._waiters: list[asyncio.Future[None]] = []
        self._char_buffer: deque[str] = deque()

    @property
    def awaiting_input(self) -> bool:
        return self.state in (EngineState.NEEDS_LINE, EngineState.NEEDS_CHAR)

    # ----- engine side -----

    async def read_line(self) -> str:
        """Wait for the player's next line."""
        return await self._wait_for_input(EngineState.NEEDS_LINE)

    async def read_char(self) -> str:
        """
        Wait for a single character.

        A pasted multi-character submission is returned one character per
        call, followed by a newline. A single character is returned on its
        own with no newline queued after it.
        """
        if self._char_buffer:
            return self._char_buffer.popleft()
        text = await self._wait_for_input(EngineState.NEEDS_CHAR)
        if not text:
            return '\n'
        if len(text) > 1:
            self._char_buffer.extend(text[1:])
            self._char_buffer.append('\n')
        return text[0]

    def mark_quit(self) -> None:
        """The engine has stopped and will not ask for input again."""
        self._char_buffer.clear()
        self._set_state(EngineState.QUIT)

    async def _wait_for_input(self, state: EngineState) -> str:
        request: asyncio.Future[str] = asyncio.get_running_loop().create_future()
        self._request = request
        self._set_state(state)
        logger.debug("Engine waiting for input (%s)", state.name)
        try:
            return await request
        finally:
            if self._request is request:
                self._request = None

    def _set_state(self, state: EngineState) -> None:
        self.state = state
        waiters, self._waiters = self._waiters, []
        for waiter in waiters:
            if not waiter.done():
                waiter.set_result(None)

    # ----- UI side -----

    async def wait_for_request(self) -> EngineState:
        """Wait until the engine asks for input or quits."""
        while self.state == EngineState.RUNNING:
            waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
            self._waiters.append(waiter)
            await waiter
        return self.state

    async def submit_line(self, text: str) -> EngineState:
        """
        Submit a line typed by the player.

        The line is recorded in history, echoed, and split into chained
        commands. The remaining commands are dropped as soon as the engine
        stops asking for lines.
        """
        self._require_pending()
        self.history.add(text)

        if self.state == EngineState.NEEDS_CHAR:
            return await self._send(text)

        if self.echo:
            self.screen.append_to_window0(f"{text}\n")

        commands = split_commands(text)
        if not commands:
            return await self._send("")

        state = await self._send(commands[0])
        for command in commands[1:]:
            if state != EngineState.NEEDS_LINE:
                logger.debug("Dropping chained command %r (engine state %s)", command, state.name)
                break
            if self.echo:
                self.screen.append_to_window0(f"{command}\n")
            state = await self._send(command)
        return state

    async def submit_char(self, char: str) -> EngineState:
        """Answer a character request, bypassing history and chaining."""
        self._require_pending()
        if self.state != EngineState.NEEDS_CHAR:
            logger.warning("submit_char(%r) while engine wants a line; discarded", char)
            raise InputNotPendingError("engine is not waiting for a character")
        return await self._send(char or '\n')

    async def submit_key(self, key: Key) -> str | None:
        """
        Handle a special key.

        In character mode the key's ZSCII code goes straight to the engine.
        In line mode UP/DOWN browse history and the text for the input
        field is returned. Returns None when the key had no line-edit effect.
        """
        if self.state == EngineState.NEEDS_CHAR:
            await self.submit_char(zscii_for_key(key))
            return None
        if key == Key.UP:
            return self.history_up()
        if key == Key.DOWN:
            return self.history_down()
        return None

    def history_up(self) -> str | None:
        return self.history.up()

    def history_down(self) -> str | None:
        return self.history.down()

    def cancel(self) -> None:
        """Release a blocked read with a cancelled state (session teardown)."""
        request, self._request = self._request, None
        if request is not None and not request.done():
            request.cancel()
        self.mark_quit()

    def _require_pending(self) -> None:
        if self._request is None or self._request.done():
            logger.warning("Input submitted but no read is pending; discarded")
            raise InputNotPendingError("engine is not waiting for input")

    async def _send(self, text: str) -> EngineState:
        self._require_pending()
        request = self._request
        self._request = None
        self.screen.apply_pending_shrink()
        self.state = EngineState.RUNNING
        request.set_result(text)
        return await self.wait_for_request()
