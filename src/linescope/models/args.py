"""Argument models for the read_file tool."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

DEFAULT_OFFSET = 1
DEFAULT_LIMIT = 2000
DEFAULT_MAX_LEVELS = 0
DEFAULT_INCLUDE_SIBLINGS = False
DEFAULT_INCLUDE_HEADER = True


class ReadMode(str, Enum):
    """How read_file selects lines."""

    SLICE = "slice"
    INDENTATION = "indentation"


class IndentationArgs(BaseModel):
    """Options for indentation mode."""

    model_config = ConfigDict(frozen=True)

    anchor_line: Optional[StrictInt] = Field(
        default=None,
        ge=0,
        description="1-indexed line to build context around (defaults to offset).",
    )
    max_levels: StrictInt = Field(
        default=DEFAULT_MAX_LEVELS,
        ge=0,
        description="Parent levels to expand above the anchor; 0 expands to indent 0.",
    )
    include_siblings: StrictBool = Field(
        default=DEFAULT_INCLUDE_SIBLINGS,
        description="Keep collecting sibling blocks at the outermost level.",
    )
    include_header: StrictBool = Field(
        default=DEFAULT_INCLUDE_HEADER,
        description="Keep comment lines directly above the block.",
    )
    max_lines: Optional[StrictInt] = Field(
        default=None,
        ge=0,
        description="Hard cap on returned lines.",
    )


class ReadFileArgs(BaseModel):
    """Arguments accepted by the read_file tool.

    Numbers and flags are not coerced from other JSON types.
    """

    model_config = ConfigDict(frozen=True)

    file_path: StrictStr = Field(..., description="Absolute path to the file.")
    offset: StrictInt = Field(default=DEFAULT_OFFSET, ge=0, description="1-indexed start line.")
    limit: StrictInt = Field(default=DEFAULT_LIMIT, ge=0, description="Maximum lines to return.")
    mode: ReadMode = ReadMode.SLICE
    indentation: Optional[IndentationArgs] = None

    @property
    def indentation_options(self) -> IndentationArgs:
        """Indentation options with defaults filled in."""
        return self.indentation if self.indentation is not None else IndentationArgs()
