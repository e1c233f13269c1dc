"""
Console text backend for RPN token logs.

Renders an OrderedStringLog into the plain-text dump shown by
OrderedStringLog.display():

    ---MOSTRANDO POLACA INVERSA------
    <entry 1>
    <entry 2>
    ...

No indices, separators or escaping are added. Entries are written verbatim.
"""

from __future__ import annotations

import logging
from typing import List, TextIO

from rpnlog.log import BANNER, OrderedStringLog


logger = logging.getLogger(__name__)


def render_lines(log: OrderedStringLog) -> List[str]:
    """Banner followed by every entry, in insertion order."""
    lines = [BANNER]
    lines.extend(log.entries)
    return lines


def render_text(log: OrderedStringLog) -> str:
    """
    Render the exact text display() writes.

    Every line, the last one included, is terminated by a newline.
    """
    return "".join(f"{line}\n" for line in render_lines(log))


def write_log(log: OrderedStringLog, sink: TextIO) -> None:
    """
    Write the rendered log to a writable text stream.

    The stream belongs to the caller and is never closed here.
    """
    sink.write(render_text(log))


def save_log_file(log: OrderedStringLog, filename: str) -> None:
    """
    Render the log and save it to a file.

    Args:
        log: Log to render
        filename: Output file path
    """
    text = render_text(log)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(text)
    logger.debug("Saved %d entries to %s", len(log), filename)


__all__ = ["render_lines", "render_text", "write_log", "save_log_file"]
