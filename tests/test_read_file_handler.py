"""Tests for the read_file tool handler."""

import json

import pytest

from linescope.errors import FatalToolError, FileClientError, ReportedToolError
from linescope.models import CustomPayload, FunctionPayload, ToolInvocation, ToolOutput
from linescope.tools import (
    READ_FILE_TOOL_NAME,
    ReadFileHandler,
    dispatch,
    get_tool_handler,
    register_read_file_handler,
)

pytestmark = pytest.mark.anyio

TEN_LINES = "\n".join(f"line {n}" for n in range(1, 11)) + "\n"

HEADER = "\n".join(
    [
        "# Helper docs",
        "def f():",
        "    a = 1",
        "    b = 2",
        "def g():",
        "    c = 3",
        "def h():",
        "    d = 4",
    ]
)


def _invocation(**arguments) -> ToolInvocation:
    return ToolInvocation(
        conversation_id="conv-1",
        tool_name=READ_FILE_TOOL_NAME,
        payload=FunctionPayload(arguments=json.dumps(arguments)),
    )


@pytest.fixture
def client(fake_client_factory):
    return fake_client_factory(
        {
            "/work/ten.txt": TEN_LINES,
            "/work/header.py": HEADER,
            "/work/empty.txt": "",
            "/work/blank.py": "def f():\n    return 1\n\nx = f()\n",
        }
    )


@pytest.fixture
def handler(client):
    return ReadFileHandler(client)


async def test_slice_returns_numbered_window(handler, client):
    output = await handler.handle(_invocation(file_path="/work/ten.txt", offset=3, limit=2))

    assert output == ToolOutput(content="L3: line 3\nL4: line 4", success=True)
    assert client.calls == [("conv-1", "/work/ten.txt", 3, 2)]


async def test_slice_defaults_read_from_first_line(handler):
    output = await handler.handle(_invocation(file_path="/work/ten.txt"))

    lines = output.content.split("\n")
    assert len(lines) == 10
    assert lines[0] == "L1: line 1"
    assert lines[-1] == "L10: line 10"


async def test_slice_of_empty_file_is_reported(handler):
    with pytest.raises(ReportedToolError, match="offset exceeds file length or file is empty"):
        await handler.handle(_invocation(file_path="/work/empty.txt"))


async def test_slice_past_end_is_reported(handler):
    with pytest.raises(ReportedToolError, match="offset exceeds file length or file is empty"):
        await handler.handle(_invocation(file_path="/work/ten.txt", offset=11))


async def test_slice_keeps_blank_lines_inside_the_file(handler):
    window = await handler.handle(_invocation(file_path="/work/blank.py", offset=2, limit=2))
    blank = await handler.handle(_invocation(file_path="/work/blank.py", offset=3, limit=1))

    assert window.content == "L2:     return 1\nL3: "
    assert blank.content == "L3: "


async def test_indentation_mode_uses_defaults(handler, client):
    output = await handler.handle(
        _invocation(file_path="/work/header.py", offset=4, mode="indentation")
    )

    assert output.content.split("\n") == [
        "L1: # Helper docs",
        "L2: def f():",
        "L3:     a = 1",
        "L4:     b = 2",
        "L5: def g():",
        "L6:     c = 3",
    ]
    assert client.calls == [("conv-1", "/work/header.py", None, None)]


async def test_indentation_mode_honours_options(handler):
    output = await handler.handle(
        _invocation(
            file_path="/work/header.py",
            offset=1,
            mode="indentation",
            indentation={"anchor_line": 4, "include_header": False, "max_lines": 2},
        )
    )

    assert output.content == "L3:     a = 1\nL4:     b = 2"


async def test_indentation_max_lines_one_returns_anchor(handler):
    output = await handler.handle(
        _invocation(
            file_path="/work/header.py",
            offset=6,
            limit=100,
            mode="indentation",
            indentation={"max_lines": 1},
        )
    )

    assert output.content == "L6:     c = 3"


async def test_indentation_anchor_past_end_is_reported(handler):
    with pytest.raises(ReportedToolError, match="anchor_line exceeds file length"):
        await handler.handle(
            _invocation(
                file_path="/work/header.py",
                mode="indentation",
                indentation={"anchor_line": 9},
            )
        )


async def test_indentation_empty_file_is_reported(handler):
    with pytest.raises(ReportedToolError, match="file is empty; nothing to read"):
        await handler.handle(_invocation(file_path="/work/empty.txt", mode="indentation"))


async def test_repeated_calls_are_identical(handler):
    invocation = _invocation(file_path="/work/header.py", offset=3, mode="indentation")
    first = await handler.handle(invocation)
    second = await handler.handle(invocation)
    assert first == second


@pytest.mark.parametrize(
    "arguments,message",
    [
        ({"file_path": "/work/ten.txt", "offset": 0}, "offset must be a 1-indexed line number"),
        ({"file_path": "/work/ten.txt", "limit": 0}, "limit must be greater than zero"),
        ({"file_path": "work/ten.txt"}, "file_path must be an absolute path"),
        ({"file_path": "/work/ten.txt", "mode": "tree"}, "failed to parse function arguments"),
        ({"file_path": "/work/ten.txt", "offset": -1}, "failed to parse function arguments"),
        ({"offset": 1}, "failed to parse function arguments"),
        ({"file_path": "/work/ten.txt", "offset": "2"}, "failed to parse function arguments"),
        ({"file_path": "/work/ten.txt", "offset": 2.0}, "failed to parse function arguments"),
        ({"file_path": "/work/ten.txt", "offset": True}, "failed to parse function arguments"),
        ({"file_path": "/work/ten.txt", "limit": "1"}, "failed to parse function arguments"),
        (
            {
                "file_path": "/work/ten.txt",
                "mode": "indentation",
                "indentation": {"include_siblings": "yes"},
            },
            "failed to parse function arguments",
        ),
        (
            {
                "file_path": "/work/ten.txt",
                "mode": "indentation",
                "indentation": {"max_lines": "3"},
            },
            "failed to parse function arguments",
        ),
    ],
)
async def test_invalid_arguments_are_reported(handler, client, arguments, message):
    with pytest.raises(ReportedToolError, match=message):
        await handler.handle(_invocation(**arguments))
    assert client.calls == []


async def test_malformed_json_is_reported(handler):
    invocation = ToolInvocation(
        conversation_id="conv-1",
        tool_name=READ_FILE_TOOL_NAME,
        payload=FunctionPayload(arguments="{not json"),
    )
    with pytest.raises(ReportedToolError, match="failed to parse function arguments"):
        await handler.handle(invocation)


async def test_non_function_payload_is_reported(handler):
    invocation = ToolInvocation(
        conversation_id="conv-1",
        tool_name=READ_FILE_TOOL_NAME,
        payload=CustomPayload(input="/work/ten.txt"),
    )
    with pytest.raises(ReportedToolError, match="unsupported payload"):
        await handler.handle(invocation)


async def test_missing_client_is_fatal():
    handler = ReadFileHandler(None)
    with pytest.raises(FatalToolError, match="file client not initialized"):
        await handler.handle(_invocation(file_path="/work/ten.txt"))


async def test_client_error_is_reported(handler):
    with pytest.raises(ReportedToolError, match="file client error: file not found") as exc_info:
        await handler.handle(_invocation(file_path="/work/missing.txt"))
    assert isinstance(exc_info.value.__cause__, FileClientError)


async def test_unexpected_client_failure_is_fatal(broken_client):
    handler = ReadFileHandler(broken_client)
    with pytest.raises(FatalToolError, match="file client call failed: connection reset"):
        await handler.handle(_invocation(file_path="/work/ten.txt"))


async def test_registered_handler_is_reachable_through_dispatch(client):
    handler = register_read_file_handler(client)
    assert get_tool_handler(READ_FILE_TOOL_NAME) is handler

    output = await dispatch(_invocation(file_path="/work/ten.txt", offset=10))
    assert output.content == "L10: line 10"


async def test_dispatch_rejects_unknown_tool():
    invocation = ToolInvocation(
        conversation_id="conv-1",
        tool_name="write_file",
        payload=FunctionPayload(arguments="{}"),
    )
    with pytest.raises(ReportedToolError, match="unsupported call: write_file"):
        await dispatch(invocation)
