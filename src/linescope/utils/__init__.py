"""Utility functions for LineScope."""

from linescope.utils.text import (
    format_line,
    measure_indent,
    render_line,
    split_lines,
    take_bytes_at_char_boundary,
    window_lines,
)

__all__ = [
    "format_line",
    "measure_indent",
    "render_line",
    "split_lines",
    "take_bytes_at_char_boundary",
    "window_lines",
]
