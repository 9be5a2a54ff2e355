"""User preferences. Stored as JSON at ~/.zscreen/prefs.json."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

PREFS_FILENAME = "prefs.json"


def get_config_dir() -> Path:
    """Config directory (ZSCREEN_CONFIG_DIR overrides ~/.zscreen)."""
    return Path(os.environ.get("ZSCREEN_CONFIG_DIR", Path.home() / ".zscreen")).expanduser()


def get_save_dir() -> Path:
    """Directory save files are written to (ZSCREEN_SAVE_DIR overrides)."""
    env = os.environ.get("ZSCREEN_SAVE_DIR")
    if env:
        return Path(env).expanduser()
    return get_config_dir() / "saves"


@dataclass
class Preferences:
    """Durable settings shared by every session."""
    save_names: list[str] = field(default_factory=list)
    skip_overwrite_confirm: bool = False
    text_color_index: int = 0
    path: Path | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict, path: Path | None = None) -> Preferences:
        names = data.get("save_names") or []
        return cls(
            save_names=[str(n) for n in names if isinstance(n, str)],
            skip_overwrite_confirm=bool(data.get("skip_overwrite_confirm", False)),
            text_color_index=int(data.get("text_color_index", 0)),
            path=path,
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data.pop("path")
        return data

    def save(self) -> None:
        """Write preferences back to disk (in-memory only when path is None)."""
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self.to_dict(), indent=2))
        logger.debug("Saved preferences to %s", self.path)


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences, falling back to defaults for a missing or bad file."""
    path = path or get_config_dir() / PREFS_FILENAME
    if not path.exists():
        return Preferences(path=path)
    try:
        data = json.loads(path.read_text())
        if not isinstance(data, dict):
            raise ValueError("preferences file does not contain an object")
        return Preferences.from_dict(data, path=path)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Error reading preferences from %s: %s", path, e)
        return Preferences(path=path)
