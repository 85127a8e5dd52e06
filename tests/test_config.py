"""Tests for configuration and tool advertisement."""

import pytest

from linescope.config import Config, ModelFamily
from linescope.tools import READ_FILE_TOOL_NAME, ensure_read_file_tool_enabled


def test_defaults_without_environment():
    config = Config.from_env({})

    assert config.workspace_root is None
    assert config.log_level == "INFO"
    assert config.model_family.experimental_supported_tools == []


def test_reads_environment(tmp_path):
    config = Config.from_env(
        {
            "LINESCOPE_ROOT": str(tmp_path),
            "LINESCOPE_LOG_LEVEL": "debug",
            "LINESCOPE_SUPPORTED_TOOLS": "shell, apply_patch,,",
        }
    )

    assert config.workspace_root == tmp_path.resolve()
    assert config.log_level == "DEBUG"
    assert config.model_family.experimental_supported_tools == ["shell", "apply_patch"]


def test_missing_root_is_a_startup_error(tmp_path):
    with pytest.raises(RuntimeError, match="not a directory"):
        Config.from_env({"LINESCOPE_ROOT": str(tmp_path / "nope")})


def test_ensure_read_file_tool_enabled_is_idempotent():
    config = Config(model_family=ModelFamily(experimental_supported_tools=["shell"]))

    ensure_read_file_tool_enabled(config)
    ensure_read_file_tool_enabled(config)

    assert config.model_family.experimental_supported_tools == ["shell", READ_FILE_TOOL_NAME]


def test_unknown_log_level_is_a_startup_error():
    with pytest.raises(RuntimeError, match="not a logging level: FOO"):
        Config.from_env({"LINESCOPE_LOG_LEVEL": "foo"})
