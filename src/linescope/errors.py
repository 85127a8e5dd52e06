"""Error types raised while handling tool calls."""


class ToolCallError(Exception):
    """Base class for failures surfaced from a tool call."""


class ReportedToolError(ToolCallError):
    """Recoverable failure reported back to the caller.

    The tool call fails but the surrounding session continues.
    """


class FatalToolError(ToolCallError):
    """Failure that aborts the tool call path (never retried)."""


class FileClientError(Exception):
    """Transport or protocol failure raised by a file client."""
