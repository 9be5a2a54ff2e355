"""Collect a save name from the player and move save blobs to and from disk.

The blob itself is owned by the engine and treated as opaque bytes.
Every failure (cancelled prompt, declined overwrite, unreadable or empty
file) comes back to the engine as False/None so the player can retry.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from zscreen.saves.history import SaveNameHistory, normalize_filename

logger = logging.getLogger(__name__)

SAVE_EXTENSION = ".sav"


class SavePrompt(Protocol):
    """Front-end hooks for the save and restore dialogs."""

    async def choose_save_name(self, suggested: str, previous: list[str]) -> str | None:
        """Ask for a save name; None when cancelled."""
        ...

    async def confirm_overwrite(self, name: str) -> tuple[bool, bool]:
        """Ask to overwrite; returns (confirmed, dont_ask_again)."""
        ...

    async def choose_restore_file(self, save_dir: Path) -> Path | None:
        """Ask which file to restore; None when cancelled."""
        ...


class SaveManager:
    """Engine-facing save/restore backed by a save directory."""

    def __init__(self, save_dir: Path, history: SaveNameHistory, prompt: SavePrompt | None = None):
        self.save_dir = Path(save_dir)
        self.history = history
        self.prompt = prompt

    async def save(self, data: bytes) -> bool:
        """Write the engine's save blob under a player-chosen name."""
        if self.prompt is None:
            logger.warning("Save failed: no save prompt available")
            return False

        raw = await self.prompt.choose_save_name(self.history.suggested_name(), self.history.names)
        name = normalize_filename(raw or "")
        if not name:
            logger.info("Save cancelled")
            return False

        if self.history.should_confirm_overwrite(name):
            confirmed, dont_ask_again = await self.prompt.confirm_overwrite(name)
            if dont_ask_again:
                try:
                    self.history.skip_confirmation()
                except OSError as e:
                    logger.warning("Could not store overwrite preference: %s", e)
            if not confirmed:
                logger.info("Save cancelled: overwrite of %r declined", name)
                return False

        path = self.save_dir / f"{name}{SAVE_EXTENSION}"
        try:
            self.save_dir.mkdir(parents=True, exist_ok=True)
            with open(path, 'wb') as f:
                f.write(bytes(data))
        except OSError as e:
            logger.warning("Save error: %s", e)
            return False

        try:
            self.history.record_used(name)
        except OSError as e:
            logger.warning("Game saved but save history not updated: %s", e)
        logger.info("Game saved as %s", path.name)
        return True

    async def restore(self) -> bytes | None:
        """Read a save blob chosen by the player."""
        if self.prompt is None:
            logger.warning("Restore failed: no save prompt available")
            return None

        path = await self.prompt.choose_restore_file(self.save_dir)
        if path is None:
            logger.info("Restore cancelled")
            return None

        path = Path(path)
        if path.suffix.lower() != SAVE_EXTENSION:
            logger.warning("Selected file %s is not a %s file", path.name, SAVE_EXTENSION)

        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            logger.warning("Restore error: %s", e)
            return None

        if not data:
            logger.warning("Restore failed: %s is empty", path.name)
            return None

        logger.info("Game restored from %s", path.name)
        return data
