"""Line splitting and formatting helpers."""

MAX_LINE_LENGTH = 500  # bytes of UTF-8
TAB_WIDTH = 4


def split_lines(content: str) -> list[str]:
    """Split text into physical lines.

    Only ``\\n`` separates lines. A trailing newline does not add an empty
    line, and trailing carriage returns are stripped from every line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def measure_indent(line: str) -> int:
    """Return the column width of the leading spaces and tabs."""
    width = 0
    for char in line:
        if char == " ":
            width += 1
        elif char == "\t":
            width += TAB_WIDTH
        else:
            break
    return width


def take_bytes_at_char_boundary(text: str, max_bytes: int) -> str:
    """Return the longest prefix of ``text`` that fits in ``max_bytes`` UTF-8 bytes.

    The cut never lands inside a multi-byte character.
    """
    encoded = text.encode("utf-8", errors="replace")
    if len(encoded) <= max_bytes:
        return text
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


def format_line(line: str | bytes) -> str:
    """Decode (if needed) and truncate a line for display.

    Args:
        line: Raw line text or bytes; invalid UTF-8 is replaced.

    Returns:
        At most MAX_LINE_LENGTH bytes of text, cut at a character boundary
    """
    if isinstance(line, bytes):
        line = line.decode("utf-8", errors="replace")
    return take_bytes_at_char_boundary(line, MAX_LINE_LENGTH)


def render_line(number: int, display: str) -> str:
    """Render a numbered output line."""
    return f"L{number}: {display}"


def window_lines(content: str, line: int | None = None, limit: int | None = None) -> str:
    """Return a 1-indexed window of lines from ``content``, terminators kept.

    Lines are separated by ``\\n`` as in ``split_lines``, so a blank line at
    the end of the window survives a later ``split_lines`` call.
    """
    parts = [part + "\n" for part in content.split("\n")]
    parts[-1] = parts[-1][:-1]
    start = max((line or 1) - 1, 0)
    end = start + limit if limit is not None else None
    return "".join(parts[start:end])
