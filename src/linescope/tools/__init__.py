"""Tool handlers and their registry."""

from linescope.tools.read_file import (
    READ_FILE_TOOL_NAME,
    ReadFileHandler,
    ensure_read_file_tool_enabled,
    register_read_file_handler,
)
from linescope.tools.registry import (
    dispatch,
    get_tool_handler,
    register_tool_handler,
    registered_tools,
)

__all__ = [
    "READ_FILE_TOOL_NAME",
    "ReadFileHandler",
    "dispatch",
    "ensure_read_file_tool_enabled",
    "get_tool_handler",
    "register_read_file_handler",
    "register_tool_handler",
    "registered_tools",
]
