"""Shared fixtures for LineScope tests."""

from pathlib import Path
from typing import Optional

import pytest

from linescope.errors import FileClientError
from linescope.utils.text import window_lines


class FakeFileClient:
    """In-memory TextFileClient that records every call."""

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.calls: list[tuple[str, str, Optional[int], Optional[int]]] = []

    async def read_text_file(
        self,
        session_id: str,
        path: Path,
        line: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> str:
        self.calls.append((session_id, str(path), line, limit))
        if str(path) not in self.files:
            raise FileClientError(f"file not found: {path}")
        content = self.files[str(path)]
        if line is None and limit is None:
            return content
        return window_lines(content, line, limit)


class BrokenFileClient:
    """Client whose transport fails unexpectedly."""

    async def read_text_file(self, session_id, path, line=None, limit=None) -> str:
        raise RuntimeError("connection reset")


@pytest.fixture
def fake_client_factory():
    return FakeFileClient


@pytest.fixture
def broken_client():
    return BrokenFileClient()
