"""Load JSON-lines transcripts of engine IO requests."""

import json
from pathlib import Path
from typing import Any, Iterable

from zscreen.errors import TranscriptError


def parse_transcript(lines: Iterable[str]) -> list[dict[str, Any]]:
    """
    Parse transcript lines into request dictionaries.

    Each non-blank line is one JSON object with a "command" field, in the
    same shape GameSession.handle() accepts. Lines starting with '#' are
    comments.
    """
    requests: list[dict[str, Any]] = []
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        try:
            request = json.loads(line)
        except json.JSONDecodeError as e:
            raise TranscriptError(f"invalid JSON: {e.msg}", lineno) from e
        if not isinstance(request, dict) or "command" not in request:
            raise TranscriptError("expected an object with a 'command' field", lineno)
        requests.append(request)
    return requests


def load_transcript(path: str | Path) -> list[dict[str, Any]]:
    """Load a transcript file from disk."""
    path = Path(path)
    with open(path, encoding='utf-8') as f:
        return parse_transcript(f)
