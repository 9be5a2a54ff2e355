"""Player input: history, chained commands and char-mode keys."""

from zscreen.input.coordinator import EngineState, InputCoordinator, split_commands
from zscreen.input.history import InputHistory
from zscreen.input.keys import Key, zscii_for_key

__all__ = [
    "EngineState",
    "InputCoordinator",
    "split_commands",
    "InputHistory",
    "Key",
    "zscii_for_key",
]
