"""Tests for input history and the engine/player input rendezvous."""

import asyncio

import pytest

from zscreen.errors import InputNotPendingError
from zscreen.input import EngineState, InputCoordinator, InputHistory, Key, split_commands, zscii_for_key
from zscreen.screen.model import ScreenModel


async def line_engine(coord: InputCoordinator, received: list[str], count: int) -> None:
    """Read count lines, then quit."""
    for _ in range(count):
        received.append(await coord.read_line())
    coord.mark_quit()


class TestInputHistory:
    def test_consecutive_duplicates_skipped(self) -> None:
        history = InputHistory()
        for line in ("look", "look", "north", "look", ""):
            history.add(line)
        assert history.entries == ["look", "north", "look"]

    def test_browse_up_and_down(self) -> None:
        history = InputHistory()
        history.add("look")
        history.add("north")
        assert history.up() == "north"
        assert history.up() == "look"
        assert history.up() == "look"
        assert history.down() == "north"
        assert history.down() == ""
        assert history.index == -1
        assert history.down() is None

    def test_empty_history(self) -> None:
        history = InputHistory()
        assert history.up() is None
        assert history.down() is None

    def test_add_resets_browse(self) -> None:
        history = InputHistory()
        history.add("a")
        history.up()
        history.add("b")
        assert history.index == -1
        assert history.up() == "b"


class TestKeys:
    def test_zscii_codes(self) -> None:
        assert zscii_for_key(Key.UP) == chr(129)
        assert zscii_for_key(Key.RIGHT) == chr(132)
        assert zscii_for_key(Key.ESCAPE) == chr(27)
        assert zscii_for_key(Key.BACKSPACE) == chr(8)
        assert zscii_for_key(Key.ENTER) == '\n'

    def test_split_commands(self) -> None:
        assert split_commands("open mailbox.take leaflet") == ["open mailbox", "take leaflet"]
        assert split_commands(" n . . e ") == ["n", "e"]
        assert split_commands("") == []


class TestInputCoordinator:
    @pytest.mark.asyncio
    async def test_chained_commands_fed_in_order(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        received: list[str] = []
        task = asyncio.create_task(line_engine(coord, received, 3))

        assert await coord.wait_for_request() == EngineState.NEEDS_LINE
        state = await coord.submit_line("open mailbox.take leaflet")

        assert state == EngineState.NEEDS_LINE
        assert received == ["open mailbox", "take leaflet"]
        assert coord.history.entries == ["open mailbox.take leaflet"]
        echoed = [row.rstrip() for row in screen.window_text(0)]
        assert echoed[:2] == ["open mailbox.take leaflet", "take leaflet"]

        assert await coord.submit_line("wait") == EngineState.QUIT
        await task

    @pytest.mark.asyncio
    async def test_chain_dropped_when_engine_stops_asking(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        received: list[str] = []

        async def engine() -> None:
            received.append(await coord.read_line())
            received.append(await coord.read_char())
            coord.mark_quit()

        task = asyncio.create_task(engine())
        await coord.wait_for_request()
        state = await coord.submit_line("yes.no")

        assert state == EngineState.NEEDS_CHAR
        assert received == ["yes"]
        await coord.submit_char("y")
        await task
        assert received == ["yes", "y"]

    @pytest.mark.asyncio
    async def test_empty_line(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        received: list[str] = []
        task = asyncio.create_task(line_engine(coord, received, 1))
        await coord.wait_for_request()
        await coord.submit_line("")
        await task
        assert received == [""]
        assert len(coord.history) == 0

    @pytest.mark.asyncio
    async def test_echo_disabled(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen, echo=False)
        task = asyncio.create_task(line_engine(coord, [], 1))
        await coord.wait_for_request()
        await coord.submit_line("look")
        await task
        assert screen.window0.height == 0

    @pytest.mark.asyncio
    async def test_pasted_text_in_char_mode(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        received: list[str] = []

        async def engine() -> None:
            for _ in range(3):
                received.append(await coord.read_char())
            await coord.read_line()

        task = asyncio.create_task(engine())
        await coord.wait_for_request()
        state = await coord.submit_line("ab")

        assert state == EngineState.NEEDS_LINE
        assert received == ['a', 'b', '\n']
        coord.cancel()
        await asyncio.gather(task, return_exceptions=True)

    @pytest.mark.asyncio
    async def test_single_char_has_no_trailing_newline(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        received: list[str] = []

        async def engine() -> None:
            received.append(await coord.read_char())
            received.append(await coord.read_char())

        task = asyncio.create_task(engine())
        await coord.wait_for_request()
        state = await coord.submit_line("y")

        assert state == EngineState.NEEDS_CHAR
        assert received == ["y"]
        await coord.submit_char("n")
        await task
        assert received == ["y", "n"]

    @pytest.mark.asyncio
    async def test_submit_without_request(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        with pytest.raises(InputNotPendingError):
            await coord.submit_line("look")
        assert screen.window0.height == 0

    @pytest.mark.asyncio
    async def test_submit_char_in_line_mode(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        task = asyncio.create_task(line_engine(coord, [], 1))
        await coord.wait_for_request()
        with pytest.raises(InputNotPendingError):
            await coord.submit_char("x")
        await coord.submit_line("x")
        await task

    @pytest.mark.asyncio
    async def test_key_in_char_mode_sends_zscii(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        received: list[str] = []

        async def engine() -> None:
            received.append(await coord.read_char())
            coord.mark_quit()

        task = asyncio.create_task(engine())
        await coord.wait_for_request()
        assert await coord.submit_key(Key.UP) is None
        await task
        assert received == [chr(129)]

    @pytest.mark.asyncio
    async def test_keys_browse_history_in_line_mode(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        coord.history.add("look")
        coord.history.add("north")
        assert await coord.submit_key(Key.UP) == "north"
        assert await coord.submit_key(Key.UP) == "look"
        assert await coord.submit_key(Key.DOWN) == "north"
        assert await coord.submit_key(Key.LEFT) is None

    @pytest.mark.asyncio
    async def test_submit_applies_deferred_shrink(self, screen: ScreenModel) -> None:
        screen.split(4)
        screen.print("Quote box text", window=1)
        screen.split(1)
        assert screen.window1.height == 4

        coord = InputCoordinator(screen)
        task = asyncio.create_task(line_engine(coord, [], 1))
        await coord.wait_for_request()
        await coord.submit_line("z")
        await task
        assert screen.window1.height == 1
        assert screen.pending_shrink_height is None

    @pytest.mark.asyncio
    async def test_cancel_releases_engine(self, screen: ScreenModel) -> None:
        coord = InputCoordinator(screen)
        task = asyncio.create_task(line_engine(coord, [], 1))
        await coord.wait_for_request()
        coord.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert coord.state == EngineState.QUIT
        assert not coord.awaiting_input
