"""One-shot rendezvous between the engine and the UI's render commit."""

import asyncio
import logging

from zscreen.errors import RenderSequenceError

logger = logging.getLogger(__name__)


class RenderSyncGate:
    """
    Lets the engine wait until the UI has committed a visual update.

    At most one wait may be outstanding. The UI calls signal_complete()
    after committing; extra signals are ignored.
    """

    def __init__(self) -> None:
        self._future: asyncio.Future[None] | None = None

    @property
    def pending(self) -> bool:
        return self._future is not None and not self._future.done()

    def begin_wait(self) -> asyncio.Future[None]:
        """Create the token the engine awaits."""
        if self.pending:
            logger.warning("Render wait requested while another is outstanding")
            raise RenderSequenceError("a render wait is already outstanding")
        self._future = asyncio.get_running_loop().create_future()
        return self._future

    def signal_complete(self) -> None:
        """Resolve the outstanding wait, if any."""
        future, self._future = self._future, None
        if future is not None and not future.done():
            future.set_result(None)

    def cancel(self) -> None:
        """Release an outstanding wait with a cancelled state."""
        future, self._future = self._future, None
        if future is not None and not future.done():
            future.cancel()
