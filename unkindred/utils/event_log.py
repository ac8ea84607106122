"""In-game message log: an append-only sequence of colored lines."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import Iterator

from unkindred.core.colors import WHITE, Color


@dataclass(frozen=True, slots=True)
class LogEntry:
    """A single message shown to the player."""

    text: str
    color: Color = WHITE


class MessageLog:
    """Unbounded, append-only message log.

    Entries are never edited or removed. Rendering asks for the newest
    entries that fit a panel via :meth:`visible_window`.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []

    def add(self, text: str, color: Color = WHITE) -> LogEntry:
        entry = LogEntry(text, color)
        self._entries.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._entries))

    def latest(self, count: int = 50) -> list[LogEntry]:
        """Return the *count* most recent entries, oldest first."""
        if count <= 0:
            return []
        return self._entries[-count:]

    def visible_window(self, height: int, width: int | None = None) -> list[LogEntry]:
        """Lines for a panel *height* rows tall, oldest at the top.

        With a *width*, long messages wrap onto several lines and the window
        is filled from the newest message backwards.
        """
        if height <= 0:
            return []
        lines: list[LogEntry] = []
        for entry in reversed(self._entries):
            if width is None:
                wrapped = [entry.text]
            else:
                wrapped = textwrap.wrap(entry.text, width) or [""]
            for line in reversed(wrapped):
                lines.append(LogEntry(line, entry.color))
                if len(lines) == height:
                    return lines[::-1]
        return lines[::-1]
