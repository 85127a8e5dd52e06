"""Envelope types for tool invocations."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ToolKind(str, Enum):
    FUNCTION = "function"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FunctionPayload:
    """Function-style call carrying a JSON argument object."""

    arguments: str


@dataclass(frozen=True)
class CustomPayload:
    """Free-form call carrying raw text input."""

    input: str


ToolPayload = Union[FunctionPayload, CustomPayload]


@dataclass(frozen=True)
class ToolInvocation:
    """A single named tool call within a conversation."""

    conversation_id: str
    tool_name: str
    payload: ToolPayload
    call_id: str = ""

    @property
    def session_id(self) -> str:
        """Session the call belongs to, as seen by the file client."""
        return str(self.conversation_id)


@dataclass(frozen=True)
class ToolOutput:
    """Result returned from a successful tool call."""

    content: str
    success: bool = True
