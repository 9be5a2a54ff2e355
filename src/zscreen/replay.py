"""Drive a GameSession from a recorded transcript and scripted player input."""

import asyncio
import logging
from typing import Any, Iterable

from zscreen.input.coordinator import EngineState
from zscreen.session import GameSession

logger = logging.getLogger(__name__)


async def replay(
    requests: Iterable[dict[str, Any]],
    inputs: Iterable[str] = (),
    session: GameSession | None = None,
) -> GameSession:
    """
    Replay engine requests against a session.

    Read requests are answered from inputs through the session's input
    coordinator, so history, echo and command chaining behave as they
    would for a live player. Replay stops when the transcript ends or the
    inputs run out; the session is closed if the engine is still blocked.
    """
    session = session or GameSession()
    requests = list(requests)
    pending = list(inputs)

    async def engine() -> None:
        for request in requests:
            await session.handle(request)

    task = session.run_engine(engine())
    state = await session.input.wait_for_request()
    while state in (EngineState.NEEDS_LINE, EngineState.NEEDS_CHAR) and pending:
        state = await session.input.submit_line(pending.pop(0))

    if state != EngineState.QUIT:
        logger.info("Replay out of input with the engine still waiting; closing session")
        session.close()
    await asyncio.gather(task, return_exceptions=True)
    return session
