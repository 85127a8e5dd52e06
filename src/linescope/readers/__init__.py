"""Line readers: indentation-scoped blocks and plain slices."""

from linescope.readers.block_reader import (
    FetchText,
    collect_file_lines,
    compute_effective_indents,
    read_block,
    read_indent_block,
    trim_empty_lines,
)
from linescope.readers.slice_reader import read_slice

__all__ = [
    "FetchText",
    "collect_file_lines",
    "compute_effective_indents",
    "read_block",
    "read_indent_block",
    "read_slice",
    "trim_empty_lines",
]
