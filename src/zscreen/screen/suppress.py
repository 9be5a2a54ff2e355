"""
Duplicate suppression for boxed overlay text.

Some games print a short notice in a box in the upper window and then
print a bracketed paraphrase of the same text to the lower window. The
filter remembers recent overlay text and drops lower-window text that
matches it.

Matching is by substring containment in either direction on normalized
text. This is a heuristic: an unrelated lower-window line that shares a
phrase with recent overlay text is suppressed too.
"""

import logging
import re
from collections import deque

logger = logging.getLogger(__name__)

# Punctuation and quote characters removed before comparing
_STRIP_PATTERN = re.compile(r"""[\[\](){}<>"'`.,;:!?\-_*/\\|~‘’“”]""")
_SPACE_PATTERN = re.compile(r'\s+')


def normalize(text: str) -> str:
    """Strip punctuation/quotes and collapse whitespace."""
    text = _STRIP_PATTERN.sub(' ', text)
    return _SPACE_PATTERN.sub(' ', text).strip()


class DuplicateSuppressionFilter:
    """Rolling set of recently printed overlay text."""

    def __init__(self, capacity: int = 16):
        self._recent: deque[str] = deque(maxlen=capacity)

    @property
    def is_live(self) -> bool:
        """True while overlay text is recorded."""
        return bool(self._recent)

    @property
    def recorded(self) -> list[str]:
        return list(self._recent)

    def record(self, text: str) -> None:
        """Remember overlay text (empty text after normalizing is ignored)."""
        norm = normalize(text)
        if not norm or norm in self._recent:
            return
        self._recent.append(norm)

    def should_suppress(self, text: str) -> bool:
        """Check whether lower-window text duplicates recorded overlay text."""
        norm = normalize(text)
        if not norm:
            return False
        for seen in self._recent:
            if norm in seen or seen in norm:
                logger.debug("Suppressing lower-window text %r (matches %r)", text, seen)
                return True
        return False

    def clear(self) -> None:
        self._recent.clear()
