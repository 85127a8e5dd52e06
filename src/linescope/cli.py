"""CLI entry point for LineScope."""

import argparse
import json
import logging
import os
import sys
import uuid
from typing import Literal, cast

import anyio

from linescope.clients import LocalTextFileClient
from linescope.config import Config
from linescope.errors import ToolCallError
from linescope.models import DEFAULT_LIMIT, DEFAULT_OFFSET, FunctionPayload, ToolInvocation
from linescope.tools import READ_FILE_TOOL_NAME, dispatch, register_read_file_handler

logger = logging.getLogger(__name__)


def serve(config: Config, transport: str = "stdio") -> None:
    """Start the MCP server.

    Args:
        config: Runtime configuration
        transport: Transport protocol (stdio or sse)
    """
    # Import here to avoid loading MCP unless needed
    from linescope.server import create_mcp_server

    logger.info(f"Serving read_file via {transport}")
    if config.workspace_root is not None:
        logger.info(f"Reads confined to {config.workspace_root}")
    mcp = create_mcp_server(config)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def build_arguments(args: argparse.Namespace) -> dict:
    """Translate parsed CLI flags into read_file arguments."""
    arguments: dict = {
        "file_path": args.file,
        "offset": args.offset,
        "limit": args.limit,
        "mode": args.mode,
    }
    if args.mode == "indentation":
        indentation: dict = {
            "max_levels": args.max_levels,
            "include_siblings": args.include_siblings,
            "include_header": not args.no_header,
        }
        if args.anchor_line is not None:
            indentation["anchor_line"] = args.anchor_line
        if args.max_lines is not None:
            indentation["max_lines"] = args.max_lines
        arguments["indentation"] = indentation
    return arguments


def read(config: Config, arguments: dict) -> str:
    """Run a single read_file call against the local filesystem.

    Raises:
        ToolCallError: If the call is rejected or the read fails
    """
    register_read_file_handler(LocalTextFileClient(config.workspace_root))
    invocation = ToolInvocation(
        conversation_id=str(uuid.uuid4()),
        tool_name=READ_FILE_TOOL_NAME,
        payload=FunctionPayload(arguments=json.dumps(arguments)),
    )
    output = anyio.run(dispatch, invocation)
    return output.content


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="linescope",
        description="LineScope - indentation-aware file reading for agents",
    )
    parser.add_argument(
        "--root",
        help="Confine reads to this directory (overrides LINESCOPE_ROOT)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server exposing read_file",
    )
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    # read command
    read_parser = subparsers.add_parser(
        "read",
        help="Read lines from a file and print them",
    )
    read_parser.add_argument("file", help="Absolute path to the file")
    read_parser.add_argument("--offset", type=int, default=DEFAULT_OFFSET)
    read_parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    read_parser.add_argument(
        "--mode",
        choices=["slice", "indentation"],
        default="slice",
        help="Read mode (default: slice)",
    )
    read_parser.add_argument("--anchor-line", type=int, default=None)
    read_parser.add_argument(
        "--max-levels",
        type=int,
        default=0,
        help="Parent levels to include; 0 expands to the top level (default: 0)",
    )
    read_parser.add_argument(
        "--include-siblings",
        action="store_true",
        help="Keep sibling blocks at the outermost level",
    )
    read_parser.add_argument(
        "--no-header",
        action="store_true",
        help="Do not keep comment lines directly above the block",
    )
    read_parser.add_argument("--max-lines", type=int, default=None)

    args = parser.parse_args(argv)

    environ = dict(os.environ)
    if args.root:
        environ["LINESCOPE_ROOT"] = args.root
    try:
        config = Config.from_env(environ)
    except RuntimeError as err:
        print(err, file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(message)s",
    )

    if args.command == "serve":
        serve(config, args.transport)
    elif args.command == "read":
        try:
            print(read(config, build_arguments(args)))
        except ToolCallError as err:
            logger.error(f"Error: {err}")
            sys.exit(1)


if __name__ == "__main__":
    main()
