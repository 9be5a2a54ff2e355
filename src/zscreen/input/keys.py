"""Special keys and their ZSCII codes for character input."""

from enum import Enum, auto

from zscreen.core.constants import (
    ZSCII_DELETE,
    ZSCII_DOWN,
    ZSCII_ESCAPE,
    ZSCII_LEFT,
    ZSCII_NEWLINE,
    ZSCII_RIGHT,
    ZSCII_UP,
)


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    DELETE = auto()


ZSCII_KEYS: dict[Key, str] = {
    Key.UP: chr(ZSCII_UP),
    Key.DOWN: chr(ZSCII_DOWN),
    Key.LEFT: chr(ZSCII_LEFT),
    Key.RIGHT: chr(ZSCII_RIGHT),
    Key.ESCAPE: chr(ZSCII_ESCAPE),
    Key.BACKSPACE: chr(ZSCII_DELETE),
    Key.DELETE: chr(ZSCII_DELETE),
    Key.ENTER: ZSCII_NEWLINE,
}


def zscii_for_key(key: Key) -> str:
    """Get the character the engine expects for a special key."""
    return ZSCII_KEYS[key]
