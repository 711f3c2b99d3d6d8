"""
Translation Trace Log
=====================

An append-only narration of what the translator did: which tokens it
peeked at and consumed, which statement forms it recognized, and which
Python lines it produced. The trace is for people reading it after the
fact; nothing in the translator ever reads it back.

Each line is also mirrored to the module logger at DEBUG level, so running
the CLI with --verbose streams the narration live.
"""

import logging

logger = logging.getLogger(__name__)


class TraceLog:
    """
    Accumulates trace lines for one translation.

    Example:
        trace = TraceLog()
        trace.log("Compiling main function...")
        print(trace.text)
    """

    def __init__(self):
        self._lines: list[str] = []

    def log(self, text: str) -> None:
        """Append one line of narration."""
        self._lines.append(text)
        logger.debug(text)

    @property
    def lines(self) -> list[str]:
        """Return a copy of the recorded lines."""
        return list(self._lines)

    @property
    def text(self) -> str:
        """Return the whole trace, one line per entry."""
        if not self._lines:
            return ""
        return "\n".join(self._lines) + "\n"

    def __len__(self) -> int:
        return len(self._lines)
