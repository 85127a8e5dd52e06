"""Per-line records used by the readers."""

from dataclasses import dataclass

COMMENT_PREFIXES = ("#", "//", "--")


@dataclass(frozen=True)
class LineRecord:
    """One physical line of a source file."""

    number: int  # 1-indexed, matches the original file
    raw: str
    display: str
    indent: int

    @property
    def trimmed(self) -> str:
        return self.raw.lstrip()

    @property
    def is_blank(self) -> bool:
        return not self.trimmed

    @property
    def is_comment(self) -> bool:
        return self.raw.strip().startswith(COMMENT_PREFIXES)
