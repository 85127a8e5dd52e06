"""Configuration loaded from the environment.

Environment variables (all optional):
    LINESCOPE_ROOT              Directory reads are confined to. Default: none
    LINESCOPE_LOG_LEVEL         Logging level. Default: INFO
    LINESCOPE_SUPPORTED_TOOLS   Comma-separated tools advertised to the model
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional


@dataclass
class ModelFamily:
    """Tool capabilities advertised for the active model."""

    slug: str = "default"
    experimental_supported_tools: list[str] = field(default_factory=list)


@dataclass
class Config:
    """Runtime configuration for the server and CLI."""

    model_family: ModelFamily = field(default_factory=ModelFamily)
    workspace_root: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a Config from environment variables.

        Raises:
            RuntimeError: If LINESCOPE_ROOT is not a directory or
                LINESCOPE_LOG_LEVEL is not a logging level
        """
        env = os.environ if environ is None else environ

        root_raw = env.get("LINESCOPE_ROOT", "").strip()
        workspace_root = None
        if root_raw:
            workspace_root = Path(root_raw).expanduser().resolve()
            if not workspace_root.is_dir():
                raise RuntimeError(f"LINESCOPE_ROOT is not a directory: {workspace_root}")

        tools = [
            name.strip()
            for name in env.get("LINESCOPE_SUPPORTED_TOOLS", "").split(",")
            if name.strip()
        ]

        log_level = env.get("LINESCOPE_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(log_level), int):
            raise RuntimeError(f"LINESCOPE_LOG_LEVEL is not a logging level: {log_level}")

        return cls(
            model_family=ModelFamily(experimental_supported_tools=tools),
            workspace_root=workspace_root,
            log_level=log_level,
        )
