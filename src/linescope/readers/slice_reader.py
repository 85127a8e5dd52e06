"""Plain offset/limit windowing."""

from pathlib import Path

from linescope.errors import ReportedToolError
from linescope.models import LineRecord
from linescope.readers.block_reader import FetchText
from linescope.utils.text import format_line, measure_indent, split_lines


async def read_slice(
    fetch: FetchText,
    path: Path,
    offset: int,
    limit: int,
) -> list[LineRecord]:
    """Fetch only the requested window of lines.

    Args:
        fetch: Bound file-fetch call
        path: Absolute file path
        offset: 1-indexed first line
        limit: Maximum number of lines

    Returns:
        Records numbered from ``offset``

    Raises:
        ReportedToolError: If the window is empty
    """
    content = await fetch(path, offset, limit)
    lines = split_lines(content)
    if not lines:
        raise ReportedToolError("offset exceeds file length or file is empty")

    return [
        LineRecord(
            number=offset + idx,
            raw=raw,
            display=format_line(raw),
            indent=measure_indent(raw),
        )
        for idx, raw in enumerate(lines[:limit])
    ]
