"""Interpreter-drawn status line for version 3 games."""

from dataclasses import dataclass


@dataclass
class StatusLine:
    """Left (location) and right (score/turns or time) status text."""
    location: str = ""
    right: str = ""

    def render(self, width: int = 80) -> str:
        """Lay the status line out in width columns, location truncated first."""
        right = self.right[:width]
        room = max(0, width - len(right) - 1)
        location = self.location[:room]
        return location + ' ' * (width - len(location) - len(right)) + right


def format_score(score: str | int, turns: str | int) -> str:
    """Format a score game's right-hand side as 'score/turns'."""
    return f"{score}/{turns}"


def format_time(hours: int, minutes: int) -> str:
    """Format a time game's right-hand side as 'h:MM AM/PM'."""
    h = 12 if hours % 12 == 0 else hours % 12
    ampm = "AM" if hours < 12 else "PM"
    return f"{h}:{minutes:02d} {ampm}"
