"""Registry of tool handlers keyed by tool name."""

import logging
from typing import Optional

from linescope.errors import ReportedToolError
from linescope.models import ToolInvocation, ToolOutput
from linescope.protocols import ToolHandler

logger = logging.getLogger(__name__)

_HANDLERS: dict[str, ToolHandler] = {}


def register_tool_handler(name: str, handler: ToolHandler) -> None:
    """Register a handler under a tool name, replacing any previous one.

    Args:
        name: Tool name as seen by the model
        handler: An object implementing the ToolHandler protocol
    """
    if name in _HANDLERS:
        logger.debug(f"Replacing handler for tool '{name}'")
    _HANDLERS[name] = handler


def get_tool_handler(name: str) -> Optional[ToolHandler]:
    """Find the handler registered for ``name``, or None."""
    return _HANDLERS.get(name)


def registered_tools() -> list[str]:
    """Names of all registered tools, sorted."""
    return sorted(_HANDLERS)


async def dispatch(invocation: ToolInvocation) -> ToolOutput:
    """Route an invocation to the handler registered for its tool name."""
    handler = get_tool_handler(invocation.tool_name)
    if handler is None:
        raise ReportedToolError(f"unsupported call: {invocation.tool_name}")
    return await handler.handle(invocation)
