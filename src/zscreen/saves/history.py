"""Most-recently-used save names and the overwrite confirmation policy."""

from zscreen.config import Preferences

MAX_SAVE_NAMES = 10
DEFAULT_SAVE_NAME = "savegame"


def normalize_filename(text: str) -> str:
    """Trim and drop a trailing .sav extension."""
    name = text.strip()
    if name.lower().endswith('.sav'):
        name = name[:-4]
    return name


class SaveNameHistory:
    """
    Save names, most recent first, capped at MAX_SAVE_NAMES.

    Every change is persisted through the backing Preferences.
    """

    def __init__(self, prefs: Preferences):
        self.prefs = prefs

    @property
    def names(self) -> list[str]:
        return list(self.prefs.save_names)

    def record_used(self, name: str) -> None:
        """Move name to the front (inserting it if new) and persist."""
        names = [n for n in self.prefs.save_names if n != name]
        names.insert(0, name)
        self.prefs.save_names = names[:MAX_SAVE_NAMES]
        self.prefs.save()

    def should_confirm_overwrite(self, name: str) -> bool:
        """True if name was used before and the player has not opted out."""
        return name in self.prefs.save_names and not self.prefs.skip_overwrite_confirm

    def skip_confirmation(self) -> None:
        """Persist the player's "don't ask again" choice."""
        self.prefs.skip_overwrite_confirm = True
        self.prefs.save()

    def suggested_name(self) -> str:
        """Name to pre-fill the save prompt with."""
        return self.prefs.save_names[0] if self.prefs.save_names else DEFAULT_SAVE_NAME

    def clear(self) -> None:
        self.prefs.save_names = []
        self.prefs.save()
