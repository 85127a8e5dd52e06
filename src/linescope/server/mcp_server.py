"""FastMCP server implementation for LineScope."""

import logging
import uuid
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import StrictInt, ValidationError

from linescope.clients import LocalTextFileClient
from linescope.config import Config
from linescope.errors import ReportedToolError
from linescope.models import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    FunctionPayload,
    IndentationArgs,
    ReadFileArgs,
    ReadMode,
    ToolInvocation,
)
from linescope.protocols import TextFileClient
from linescope.tools import (
    READ_FILE_TOOL_NAME,
    dispatch,
    ensure_read_file_tool_enabled,
    register_read_file_handler,
)

logger = logging.getLogger(__name__)


def create_mcp_server(config: Config, client: Optional[TextFileClient] = None) -> FastMCP:
    """Create an MCP server exposing the read_file tool.

    Args:
        config: Runtime configuration; read_file is added to its supported tools
        client: File client to read through. Defaults to a local client
                confined to ``config.workspace_root``.

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(name="linescope")

    if client is None:
        client = LocalTextFileClient(config.workspace_root)
    register_read_file_handler(client)
    ensure_read_file_tool_enabled(config)

    # One conversation per server process
    conversation_id = str(uuid.uuid4())

    @mcp.tool(name=READ_FILE_TOOL_NAME)
    async def read_file(
        file_path: str,
        offset: StrictInt = DEFAULT_OFFSET,
        limit: StrictInt = DEFAULT_LIMIT,
        mode: ReadMode = ReadMode.SLICE,
        indentation: Optional[IndentationArgs] = None,
    ) -> str:
        """Read lines from a file with 1-indexed line numbers.

        Args:
            file_path: Absolute path to the file
            offset: 1-indexed line to start from (default: 1)
            limit: Maximum number of lines to return (default: 2000)
            mode: "slice" for a plain window, "indentation" for the block
                  enclosing the anchor line
            indentation: Options for indentation mode (anchor_line,
                  max_levels, include_siblings, include_header, max_lines)

        Returns:
            Lines formatted as "L<number>: <text>"
        """
        try:
            args = ReadFileArgs(
                file_path=file_path,
                offset=offset,
                limit=limit,
                mode=mode,
                indentation=indentation,
            )
        except ValidationError as err:
            raise ToolError(f"failed to parse function arguments: {err}") from err

        invocation = ToolInvocation(
            conversation_id=conversation_id,
            tool_name=READ_FILE_TOOL_NAME,
            payload=FunctionPayload(arguments=args.model_dump_json()),
        )
        try:
            output = await dispatch(invocation)
        except ReportedToolError as err:
            raise ToolError(str(err)) from err
        return output.content

    logger.info(f"Tools enabled: {', '.join(config.model_family.experimental_supported_tools)}")
    return mcp
