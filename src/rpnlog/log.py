"""
Core RPN Token Log

Defines the append-only container a compiler fills with postfix tokens.

ARCHITECTURAL RULE:
    The log:
        - Only grows (no removal, no in-place edits)
        - Preserves insertion order exactly, duplicates included
        - Never interprets the tokens it holds
        - Never owns or closes the stream it displays to
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple


logger = logging.getLogger(__name__)

BANNER = "---MOSTRANDO POLACA INVERSA------"


class OrderedStringLog:
    """
    Insertion-ordered, append-only sequence of text tokens.

    Example:
        log = OrderedStringLog()
        log.append("PUSH 1")
        log.append("PUSH 2")
        log.append("ADD")
        log.display()

    Writes:
        ---MOSTRANDO POLACA INVERSA------
        PUSH 1
        PUSH 2
        ADD

    Properties:
        entries:
            Tuple snapshot of the stored tokens, oldest first

        sink:
            Default output stream for display(). If None, display()
            writes to sys.stdout as it is at call time.

    IMPORTANT:
        Single-threaded by contract. Callers sharing a log across
        threads must wrap append/display in their own lock.
    """

    def __init__(self, entries: Iterable[str] = (), sink: Optional[TextIO] = None) -> None:
        self._entries: List[str] = []
        self.sink = sink
        self.extend(entries)

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def append(self, value: str) -> None:
        """
        Append a token to the end of the log.

        No validation or normalization: empty text and duplicates are
        stored as given.
        """
        self._entries.append(value)
        logger.debug("Appended entry #%d: %r", len(self._entries), value)

    def extend(self, values: Iterable[str]) -> None:
        """Append each value in order."""
        for value in values:
            self.append(value)

    def display(self, sink: Optional[TextIO] = None) -> None:
        """
        Write the banner line, then every entry on its own line.

        Args:
            sink: Stream to write to. Falls back to the sink given at
                construction, then to sys.stdout.

        Write errors from the stream propagate to the caller.
        """
        target = sink if sink is not None else self.sink
        if target is None:
            target = sys.stdout
        logger.debug("Displaying %d entries", len(self._entries))
        target.write("".join(f"{line}\n" for line in (BANNER, *self._entries)))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedStringLog):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"OrderedStringLog(entries={self._entries!r})"
