"""Backends for RPN log output (console text, files)."""

from .console import render_lines, render_text, save_log_file, write_log

__all__ = ["render_lines", "render_text", "save_log_file", "write_log"]
