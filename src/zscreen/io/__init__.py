"""Transcript I/O."""

from zscreen.io.reader import load_transcript, parse_transcript

__all__ = ["load_transcript", "parse_transcript"]
