"""File clients that satisfy the TextFileClient protocol."""

from linescope.clients.local_client import LocalTextFileClient

__all__ = ["LocalTextFileClient"]
