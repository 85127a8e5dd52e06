"""Indentation-scoped block extraction.

Given an anchor line, the reader grows a window outward in both directions
while lines stay at or above a minimum indentation, then trims blank edges.
Indentation is the only structural signal; no parsing is attempted.
"""

import logging
from collections import deque
from pathlib import Path
from typing import Awaitable, Callable, Optional

from linescope.errors import ReportedToolError
from linescope.models import IndentationArgs, LineRecord
from linescope.utils.text import TAB_WIDTH, format_line, measure_indent, split_lines

logger = logging.getLogger(__name__)

# (path, start line, max lines) -> text
FetchText = Callable[[Path, Optional[int], Optional[int]], Awaitable[str]]


def collect_file_lines(content: str) -> list[LineRecord]:
    """Build numbered, indent-measured records for every line of ``content``."""
    records = []
    for idx, raw in enumerate(split_lines(content)):
        records.append(
            LineRecord(
                number=idx + 1,
                raw=raw,
                display=format_line(raw),
                indent=measure_indent(raw),
            )
        )
    return records


def compute_effective_indents(records: list[LineRecord]) -> list[int]:
    """Indent per record, with blank lines inheriting the previous non-blank indent."""
    effective = []
    previous_indent = 0
    for record in records:
        if not record.is_blank:
            previous_indent = record.indent
        effective.append(previous_indent)
    return effective


def trim_empty_lines(window: deque[LineRecord]) -> None:
    """Drop whitespace-only lines from both ends of ``window`` in place."""
    while window and not window[0].raw.strip():
        window.popleft()
    while window and not window[-1].raw.strip():
        window.pop()


def read_block(
    records: list[LineRecord],
    offset: int,
    limit: int,
    options: IndentationArgs,
) -> list[LineRecord]:
    """Select the block of lines enclosing the anchor.

    Args:
        records: All lines of the file, in order
        offset: 1-indexed request offset (the anchor when none is given)
        limit: Maximum number of lines to return
        options: Indentation mode options

    Returns:
        A contiguous run of records containing the anchor line

    Raises:
        ReportedToolError: If offset, anchor_line, limit or max_lines are out of range
    """
    if offset == 0:
        raise ReportedToolError("offset must be a 1-indexed line number")

    if not records or offset > len(records):
        raise ReportedToolError("offset exceeds file length")

    anchor_line = options.anchor_line if options.anchor_line is not None else offset
    if anchor_line == 0 or anchor_line > len(records):
        raise ReportedToolError("anchor_line exceeds file length")

    if limit == 0:
        raise ReportedToolError("limit must be greater than zero")

    guard_limit = options.max_lines if options.max_lines is not None else limit
    if guard_limit == 0:
        raise ReportedToolError("max_lines must be greater than zero")

    anchor_index = anchor_line - 1
    effective_indents = compute_effective_indents(records)
    anchor_indent = effective_indents[anchor_index]

    if options.max_levels == 0:
        min_indent = 0
    else:
        min_indent = max(0, anchor_indent - options.max_levels * TAB_WIDTH)

    final_limit = min(limit, guard_limit, len(records))
    if final_limit == 1:
        return [records[anchor_index]]

    total = len(records)
    i = anchor_index - 1
    j = anchor_index + 1
    i_boundary_taken = 0
    j_boundary_taken = 0

    window: deque[LineRecord] = deque([records[anchor_index]])

    while len(window) < final_limit:
        progressed = 0

        if i >= 0:
            if effective_indents[i] >= min_indent:
                line = records[i]
                window.appendleft(line)
                progressed += 1
                is_boundary = effective_indents[i] == min_indent
                i -= 1

                if is_boundary and not options.include_siblings:
                    # Comment headers directly above the block may stack up.
                    allow_header_comment = options.include_header and line.is_comment
                    if allow_header_comment or i_boundary_taken == 0:
                        i_boundary_taken += 1
                    else:
                        window.popleft()
                        progressed -= 1
                        i = -1

                if len(window) >= final_limit:
                    break
            else:
                i = -1

        if j < total:
            if effective_indents[j] >= min_indent:
                window.append(records[j])
                progressed += 1
                is_boundary = effective_indents[j] == min_indent
                j += 1

                if is_boundary and not options.include_siblings:
                    if j_boundary_taken > 0:
                        window.pop()
                        progressed -= 1
                        j = total
                    j_boundary_taken += 1
            else:
                j = total

        if progressed == 0:
            break

    trim_empty_lines(window)

    selected = list(window)
    if options.max_lines is not None:
        selected = selected[: options.max_lines]

    logger.debug(f"Block around L{anchor_line}: min_indent={min_indent}, {len(selected)} line(s)")
    return selected


async def read_indent_block(
    fetch: FetchText,
    path: Path,
    offset: int,
    limit: int,
    options: IndentationArgs,
) -> list[LineRecord]:
    """Fetch the whole file and extract the block around the anchor."""
    content = await fetch(path, None, None)
    if not content:
        raise ReportedToolError("file is empty; nothing to read")
    records = collect_file_lines(content)
    return read_block(records, offset, limit, options)
