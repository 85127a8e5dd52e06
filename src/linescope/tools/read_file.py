"""The read_file tool: slice and indentation-scoped reads."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from linescope.config import Config
from linescope.errors import FatalToolError, FileClientError, ReportedToolError
from linescope.models import (
    FunctionPayload,
    ReadFileArgs,
    ReadMode,
    ToolInvocation,
    ToolKind,
    ToolOutput,
)
from linescope.protocols import TextFileClient
from linescope.readers import FetchText, read_indent_block, read_slice
from linescope.tools.registry import register_tool_handler
from linescope.utils.text import render_line

logger = logging.getLogger(__name__)

READ_FILE_TOOL_NAME = "read_file"


def register_read_file_handler(client: Optional[TextFileClient]) -> "ReadFileHandler":
    """Register a read_file handler bound to ``client`` and return it."""
    handler = ReadFileHandler(client)
    register_tool_handler(READ_FILE_TOOL_NAME, handler)
    return handler


def ensure_read_file_tool_enabled(config: Config) -> None:
    """Advertise read_file in the model family's supported tools (idempotent)."""
    tools = config.model_family.experimental_supported_tools
    if READ_FILE_TOOL_NAME not in tools:
        tools.append(READ_FILE_TOOL_NAME)


class ReadFileHandler:
    """Serves read_file calls through an injected file client."""

    kind = ToolKind.FUNCTION

    def __init__(self, client: Optional[TextFileClient]):
        self._client = client

    async def handle(self, invocation: ToolInvocation) -> ToolOutput:
        payload = invocation.payload
        if not isinstance(payload, FunctionPayload):
            raise ReportedToolError("read_file handler received unsupported payload")

        try:
            args = ReadFileArgs.model_validate_json(payload.arguments)
        except ValidationError as err:
            raise ReportedToolError(f"failed to parse function arguments: {err}") from err

        if args.offset == 0:
            raise ReportedToolError("offset must be a 1-indexed line number")

        if args.limit == 0:
            raise ReportedToolError("limit must be greater than zero")

        path = Path(args.file_path)
        if not path.is_absolute():
            raise ReportedToolError("file_path must be an absolute path")

        logger.debug(
            f"[{invocation.session_id}] read_file {path} mode={args.mode.value} "
            f"offset={args.offset} limit={args.limit}"
        )

        fetch = self._bind_fetch(invocation.session_id)
        try:
            if args.mode is ReadMode.INDENTATION:
                records = await read_indent_block(
                    fetch, path, args.offset, args.limit, args.indentation_options
                )
            else:
                records = await read_slice(fetch, path, args.offset, args.limit)
        except ReportedToolError as err:
            logger.info(f"read_file {path}: {err}")
            raise

        return ToolOutput(
            content="\n".join(render_line(r.number, r.display) for r in records),
            success=True,
        )

    def _bind_fetch(self, session_id: str) -> FetchText:
        async def fetch(path: Path, line: Optional[int], limit: Optional[int]) -> str:
            return await self._fetch_text(session_id, path, line, limit)

        return fetch

    async def _fetch_text(
        self,
        session_id: str,
        path: Path,
        line: Optional[int],
        limit: Optional[int],
    ) -> str:
        if self._client is None:
            raise FatalToolError("file client not initialized")
        try:
            return await self._client.read_text_file(session_id, path, line=line, limit=limit)
        except FileClientError as err:
            raise ReportedToolError(f"file client error: {err}") from err
        except Exception as err:
            logger.error(f"file client call failed for {path}: {err}")
            raise FatalToolError(f"file client call failed: {err}") from err
