"""
Tests for serialization and deserialization of RPN token logs.

These tests ensure JSON/YAML snapshots and text dumps load back into
an equal log, and that malformed input is rejected with LogFormatError.
"""

import pytest

from rpnlog.log import BANNER, OrderedStringLog
from rpnlog.backends import render_text
from rpnlog.serialization import (
    LogFormatError,
    log_to_dict,
    log_from_dict,
    log_to_json,
    log_from_json,
    log_to_yaml,
    log_from_yaml,
    log_from_text,
)


def build_sample_log() -> OrderedStringLog:
    return OrderedStringLog(["PUSH 1", "PUSH 2", "ADD", "", "ADD", "ASIGNAR ñ"])


def test_dict_shape():
    assert log_to_dict(OrderedStringLog(["A", "B"])) == {"entries": ["A", "B"]}


def test_json_roundtrip():
    log = build_sample_log()
    assert log_from_json(log_to_json(log)) == log


def test_yaml_roundtrip():
    log = build_sample_log()
    assert log_from_yaml(log_to_yaml(log)) == log


def test_yaml_keeps_numeric_looking_tokens_as_strings():
    log = OrderedStringLog(["1", "true", "null"])
    restored = log_from_yaml(log_to_yaml(log))
    assert restored.entries == ("1", "true", "null")


def test_text_roundtrip():
    log = build_sample_log()
    assert log_from_text(render_text(log)) == log


def test_text_trailing_empty_entry_survives():
    log = OrderedStringLog(["A", ""])
    assert log_from_text(render_text(log)).entries == ("A", "")


def test_text_without_final_newline():
    assert log_from_text(f"{BANNER}\nA\nB").entries == ("A", "B")


def test_text_banner_only_is_empty_log():
    assert len(log_from_text(BANNER + "\n")) == 0


def test_text_with_crlf_line_endings():
    text = f"{BANNER}\r\nPUSH 1\r\n\r\nADD\r\n"
    assert log_from_text(text).entries == ("PUSH 1", "", "ADD")


def test_text_keeps_other_line_separators_inside_entries():
    log = OrderedStringLog(["A\x0bB", "C\u2028D"])
    assert log_from_text(render_text(log)) == log


class TestMalformedInput:
    """Malformed snapshots raise LogFormatError."""

    def test_missing_entries_key(self):
        """A mapping without 'entries' is rejected."""
        with pytest.raises(LogFormatError, match="entries"):
            log_from_dict({})

    def test_entries_not_a_list(self):
        """'entries' must be a list."""
        with pytest.raises(LogFormatError):
            log_from_dict({"entries": "ADD"})

    def test_non_string_entry_rejected(self):
        """Non-string entries are not coerced."""
        with pytest.raises(LogFormatError, match="Entry 1"):
            log_from_dict({"entries": ["PUSH 1", 2]})

    def test_non_mapping_snapshot(self):
        """An empty YAML document is not a log."""
        with pytest.raises(LogFormatError):
            log_from_yaml("")

    def test_missing_banner(self):
        """A text dump must start with the banner."""
        with pytest.raises(LogFormatError, match="banner"):
            log_from_text("PUSH 1\nADD\n")

    def test_empty_text(self):
        """Empty text has no banner."""
        with pytest.raises(LogFormatError):
            log_from_text("")

    def test_format_error_is_value_error(self):
        """LogFormatError can be caught as ValueError."""
        assert issubclass(LogFormatError, ValueError)
