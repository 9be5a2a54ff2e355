"""Engine-to-screen command protocol."""

from zscreen.protocol.codec import decode_command
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
    needs_render_sync,
)
from zscreen.protocol.gate import RenderSyncGate

__all__ = [
    "ClearScreen",
    "Command",
    "EraseLine",
    "PrintText",
    "SetColor",
    "SetCursor",
    "SetTextStyle",
    "SetWindow",
    "SplitWindow",
    "StatusUpdate",
    "needs_render_sync",
    "decode_command",
    "RenderSyncGate",
]
