"""Save names history and save/restore file handling."""

from zscreen.saves.history import SaveNameHistory, normalize_filename
from zscreen.saves.store import SaveManager, SavePrompt

__all__ = ["SaveNameHistory", "normalize_filename", "SaveManager", "SavePrompt"]
