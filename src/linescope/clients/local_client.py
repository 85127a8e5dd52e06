"""File client backed by the local filesystem."""

import logging
from pathlib import Path
from typing import Optional

from linescope.errors import FileClientError
from linescope.utils.text import window_lines

logger = logging.getLogger(__name__)


class LocalTextFileClient:
    """Reads text files from the local filesystem.

    Every call reads the file fresh; nothing is cached between calls.
    """

    def __init__(self, root: Path | str | None = None):
        """Initialize the client.

        Args:
            root: Optional directory that all reads must stay inside.
                  Defaults to no restriction.
        """
        self.root = Path(root).resolve() if root is not None else None

    async def read_text_file(
        self,
        session_id: str,
        path: Path,
        line: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> str:
        """Read a file, or a 1-indexed window of its lines.

        Args:
            session_id: Calling session (used for logging only)
            path: Absolute path to read
            line: Optional first line of the window
            limit: Optional maximum number of lines

        Returns:
            Decoded text; invalid UTF-8 is replaced

        Raises:
            FileClientError: If the path escapes the root or cannot be read
        """
        resolved = self._resolve(Path(path))
        logger.debug(f"[{session_id}] reading {resolved}")

        try:
            raw_content = resolved.read_bytes()
        except FileNotFoundError:
            raise FileClientError(f"file not found: {path}")
        except IsADirectoryError:
            raise FileClientError(f"path is a directory: {path}")
        except (PermissionError, OSError) as err:
            raise FileClientError(f"cannot read {path}: {err}") from err

        content = raw_content.decode("utf-8", errors="replace")
        if line is None and limit is None:
            return content

        return window_lines(content, line, limit)

    def _resolve(self, path: Path) -> Path:
        """Resolve ``path`` and check it stays inside the root."""
        resolved = path.resolve()
        if self.root is None:
            return resolved
        try:
            resolved.relative_to(self.root)
        except ValueError:
            raise FileClientError(f"path escapes workspace root: {path}")
        return resolved
