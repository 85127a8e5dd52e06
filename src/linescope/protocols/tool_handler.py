"""Protocol for tool call handlers."""

from typing import Protocol, runtime_checkable

from linescope.models import ToolInvocation, ToolKind, ToolOutput


@runtime_checkable
class ToolHandler(Protocol):
    """Protocol for objects that serve a named tool."""

    @property
    def kind(self) -> ToolKind:
        """Return the kind of payload this handler expects."""
        ...

    async def handle(self, invocation: ToolInvocation) -> ToolOutput:
        """Run the tool call.

        Raises ReportedToolError for failures the caller should see and
        FatalToolError for failures that abort the call path.
        """
        ...
