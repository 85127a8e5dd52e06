"""LineScope - indentation-aware file reading for tool-calling agents."""

__version__ = "0.1.0"
