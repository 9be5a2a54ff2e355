"""Decode the engine's dictionary-shaped IO requests into commands."""

import logging
from typing import Any

from zscreen.protocol.commands import (
    ClearScreen,
    Command,
    EraseLine,
    PrintText,
    SetColor,
    SetCursor,
    SetTextStyle,
    SetWindow,
    SplitWindow,
    StatusUpdate,
)
from zscreen.screen.status import format_score, format_time

logger = logging.getLogger(__name__)

# Requests that are answered by the session rather than drawn
REQUESTS = frozenset({"read", "read_char", "get_cursor", "save", "restore", "quit"})


def _int(raw: dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key)
    if value is None:
        return default
    return int(value)


def decode_command(raw: dict[str, Any]) -> Command | None:
    """
    Translate one engine request into a display Command.

    Missing fields take the engine's defaults. Returns None for requests
    that are not display commands (see REQUESTS) or are unknown.
    """
    name = raw.get("command")

    match name:
        case "print":
            return PrintText(str(raw.get("buffer", "")), window=_int(raw, "window", 0))
        case "split_window":
            return SplitWindow(_int(raw, "lines", 0))
        case "set_window":
            return SetWindow(_int(raw, "window", 0))
        case "set_cursor":
            return SetCursor(_int(raw, "line", 1), _int(raw, "column", 1))
        case "set_text_style":
            return SetTextStyle(_int(raw, "style", 0))
        case "set_colour" | "set_color":
            return SetColor(_int(raw, "foreground", -1), _int(raw, "background", -1))
        case "clear_screen":
            return ClearScreen(_int(raw, "window_id", -1))
        case "status":
            return _decode_status(raw)
        case "erase_line":
            if _int(raw, "value", 1) == 1:
                return EraseLine()
            return None
        case _:
            if name not in REQUESTS:
                logger.debug("Ignoring unknown engine command %r", name)
            return None


def _decode_status(raw: dict[str, Any]) -> StatusUpdate:
    location = str(raw.get("room_name") or "")
    if raw.get("game_type") == "TIME":
        right = format_time(_int(raw, "hours", 0), _int(raw, "minutes", 0))
    else:
        right = format_score(raw.get("score_one") or "", raw.get("score_two") or "")
    return StatusUpdate(location, right)
