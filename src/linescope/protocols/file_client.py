"""Protocol for the file-fetch collaborator."""

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class TextFileClient(Protocol):
    """Protocol for clients that read text files on behalf of a session.

    Implementations may talk to a remote editor, a sandbox, or the local
    filesystem. Uses structural subtyping - no inheritance required.
    """

    async def read_text_file(
        self,
        session_id: str,
        path: Path,
        line: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> str:
        """Return the file's text, or a window of it.

        When ``line`` and/or ``limit`` are given only that 1-indexed window of
        lines is returned. Transport or protocol failures raise
        ``FileClientError``.
        """
        ...
