"""Protocol definitions for extensible components."""

from linescope.protocols.file_client import TextFileClient
from linescope.protocols.tool_handler import ToolHandler

__all__ = ["TextFileClient", "ToolHandler"]
