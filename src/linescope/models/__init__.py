"""Data models for LineScope."""

from linescope.models.args import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    IndentationArgs,
    ReadFileArgs,
    ReadMode,
)
from linescope.models.line import LineRecord
from linescope.models.tool import (
    CustomPayload,
    FunctionPayload,
    ToolInvocation,
    ToolKind,
    ToolOutput,
    ToolPayload,
)

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_OFFSET",
    "IndentationArgs",
    "ReadFileArgs",
    "ReadMode",
    "LineRecord",
    "CustomPayload",
    "FunctionPayload",
    "ToolInvocation",
    "ToolKind",
    "ToolOutput",
    "ToolPayload",
]
