"""Display commands sent from the engine to the screen."""

from dataclasses import dataclass

from zscreen.core.constants import CLEAR_ALL, LOWER_WINDOW, UPPER_WINDOW


@dataclass(frozen=True)
class PrintText:
    text: str
    window: int = LOWER_WINDOW


@dataclass(frozen=True)
class SplitWindow:
    lines: int


@dataclass(frozen=True)
class SetWindow:
    id: int


@dataclass(frozen=True)
class SetCursor:
    line: int
    column: int


@dataclass(frozen=True)
class SetTextStyle:
    style: int


@dataclass(frozen=True)
class SetColor:
    foreground: int
    background: int


@dataclass(frozen=True)
class ClearScreen:
    window: int = CLEAR_ALL


@dataclass(frozen=True)
class StatusUpdate:
    """Version 3 status line contents."""
    location: str
    formatted_right: str


@dataclass(frozen=True)
class EraseLine:
    """Erase from the cursor to the end of the line."""


Command = (
    PrintText
    | SplitWindow
    | SetWindow
    | SetCursor
    | SetTextStyle
    | SetColor
    | ClearScreen
    | StatusUpdate
    | EraseLine
)


def needs_render_sync(command: Command) -> bool:
    """
    Check whether the engine must wait for the display after this command.

    Overlay prints and window splits change what the player sees in ways
    games poll for, so the engine waits until the UI has committed them.
    """
    match command:
        case PrintText(window=window):
            return window == UPPER_WINDOW
        case SplitWindow():
            return True
        case _:
            return False
