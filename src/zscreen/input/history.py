"""Command-line input history with up/down browsing."""


class InputHistory:
    """
    Previously submitted lines, most recent last.

    A line is only skipped when it repeats the line right before it.
    The browse index is -1 while the player is not browsing.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self.index = -1

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, text: str) -> None:
        """Record a submitted line and stop browsing."""
        if text and (not self._entries or self._entries[-1] != text):
            self._entries.append(text)
        self.index = -1

    def reset_browse(self) -> None:
        self.index = -1

    def up(self) -> str | None:
        """Step to an older entry. Returns None when there is no history."""
        if not self._entries:
            return None
        if self.index == -1:
            self.index = len(self._entries) - 1
        elif self.index > 0:
            self.index -= 1
        return self._entries[self.index]

    def down(self) -> str | None:
        """
        Step to a newer entry.

        Stepping past the newest entry stops browsing and returns an empty
        line; returns None when not browsing.
        """
        if self.index == -1:
            return None
        if self.index < len(self._entries) - 1:
            self.index += 1
            return self._entries[self.index]
        self.index = -1
        return ""
