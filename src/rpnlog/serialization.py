"""
Serialization helpers for RPN token logs.

Provides JSON/YAML snapshots via an intermediate dict representation,
plus parsing of a display() dump back into a log.
The snapshot structure is intentionally small and explicit:

    {"entries": ["PUSH 1", "PUSH 2", "ADD"]}
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

import yaml

from rpnlog.log import BANNER, OrderedStringLog


logger = logging.getLogger(__name__)


class LogFormatError(ValueError):
    """Raised when a snapshot or text dump does not describe a log."""
    pass


def log_to_dict(log: OrderedStringLog) -> Dict[str, Any]:
    return {"entries": list(log.entries)}


def log_from_dict(d: Any) -> OrderedStringLog:
    if not isinstance(d, dict):
        raise LogFormatError(f"Expected a mapping, got {type(d).__name__}")
    if "entries" not in d:
        raise LogFormatError("Missing required key: 'entries'")
    entries = d["entries"]
    if not isinstance(entries, list):
        raise LogFormatError(f"'entries' must be a list, got {type(entries).__name__}")
    for index, entry in enumerate(entries):
        if not isinstance(entry, str):
            raise LogFormatError(
                f"Entry {index} must be a string, got {type(entry).__name__}: {entry!r}"
            )
    logger.debug("Loaded %d entries from snapshot", len(entries))
    return OrderedStringLog(entries)


def log_to_json(log: OrderedStringLog) -> str:
    return json.dumps(log_to_dict(log), ensure_ascii=False)


def log_from_json(s: str) -> OrderedStringLog:
    d = json.loads(s)
    return log_from_dict(d)


def log_to_yaml(log: OrderedStringLog) -> str:
    return yaml.safe_dump(log_to_dict(log), allow_unicode=True)


def log_from_yaml(s: str) -> OrderedStringLog:
    d = yaml.safe_load(s)
    return log_from_dict(d)


def log_from_text(text: str) -> OrderedStringLog:
    """
    Parse the text written by display() back into a log.

    The first line must be the banner. Each following line is one entry.
    A single trailing newline terminates the last entry and does not
    create an extra one. CRLF line endings are accepted.

    Entries that themselves contained newlines cannot be recovered:
    each of their lines comes back as a separate entry.

    Raises:
        LogFormatError: If the banner line is missing
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    if not lines or lines[0] != BANNER:
        first = lines[0] if lines else ""
        raise LogFormatError(f"Expected banner {BANNER!r} on line 1, got {first!r}")
    return OrderedStringLog(lines[1:])


__all__ = [
    "LogFormatError",
    "log_to_dict",
    "log_from_dict",
    "log_to_json",
    "log_from_json",
    "log_to_yaml",
    "log_from_yaml",
    "log_from_text",
]
