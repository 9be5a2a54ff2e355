"""Screen model: windows, overlay policy and status line."""

from zscreen.screen.model import ScreenModel
from zscreen.screen.status import StatusLine
from zscreen.screen.suppress import DuplicateSuppressionFilter

__all__ = ["ScreenModel", "StatusLine", "DuplicateSuppressionFilter"]
