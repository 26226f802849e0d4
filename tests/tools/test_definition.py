from __future__ import annotations

import pytest
from pydantic import ValidationError

from toolshelf.tools.builder import ToolSpec, build_tool
from toolshelf.tools.errors import ToolArgumentError


def _concat(path: str, content: str) -> str:
    return f"{path}:{content}"


@pytest.fixture
def concat_tool():
    return build_tool(
        "concat",
        ToolSpec(
            description="Join args",
            parameters=[("path", "string", "A path"), ("content", "string")],
            tags={"t"},
            client_hints={"confirm": True, "custom": "x"},
        ),
        _concat,
    )


def test_positional_call_uses_declared_order(concat_tool):
    assert concat_tool("a", "b") == "a:b"


def test_invoke_reorders_named_arguments(concat_tool):
    assert concat_tool.invoke({"content": "b", "path": "a"}) == "a:b"


def test_invoke_reports_missing_and_unexpected(concat_tool):
    with pytest.raises(ToolArgumentError) as exc:
        concat_tool.invoke({"path": "a", "extra": 1})
    assert exc.value.missing == ["content"]
    assert exc.value.unexpected == ["extra"]
    assert "concat" in str(exc.value)


def test_invoke_propagates_implementation_errors():
    def boom(path: str) -> str:
        raise PermissionError("denied")

    t = build_tool("boom", ToolSpec(parameters=[("path",)]), boom)
    with pytest.raises(PermissionError, match="denied"):
        t.invoke({"path": "x"})


def test_args_schema(concat_tool):
    assert concat_tool.args_schema() == {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "A path"},
            "content": {"type": "string"},
        },
        "required": ["path", "content"],
    }


def test_to_dict_omits_implementation_and_empty_hints(concat_tool):
    data = concat_tool.to_dict()
    assert data["name"] == "concat"
    assert data["tags"] == ["t"]
    assert data["client_hints"] == {"confirm": True, "custom": "x"}
    assert data["parameters"][0] == {
        "name": "path",
        "type": "string",
        "description": "A path",
    }
    assert "implementation" not in data


def test_definitions_are_immutable(concat_tool):
    with pytest.raises(ValidationError):
        concat_tool.name = "other"
