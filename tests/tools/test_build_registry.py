from __future__ import annotations

import pytest

from toolshelf.tools import build_registry
from toolshelf.tools.builtin import TOOL_DEFINITIONS
from toolshelf.tools.errors import DuplicateToolError


def test_build_registry_registers_builtins_in_order():
    registry = build_registry()
    assert registry.names() == [
        "read_file",
        "list_directory",
        "create_file",
        "create_directory",
    ]
    assert registry.get_by_category("filesystem") == TOOL_DEFINITIONS


def test_build_registry_include_exclude():
    assert build_registry(include={"read_file"}).names() == ["read_file"]
    names = build_registry(exclude={"create_file", "create_directory"}).names()
    assert names == ["read_file", "list_directory"]


def test_build_registry_returns_fresh_instances():
    a = build_registry()
    b = build_registry()
    assert a is not b
    assert len(a) == len(b) == 4


def test_builtin_names_are_unique_under_strict_mode():
    registry = build_registry(strict=True)
    with pytest.raises(DuplicateToolError):
        registry.register(TOOL_DEFINITIONS[0])


def test_definitions_export_for_clients():
    registry = build_registry()
    exported = [d.to_dict() for d in registry.get_all()]
    by_name = {d["name"]: d for d in exported}
    assert by_name["create_file"]["client_hints"] == {"confirm": True}
    assert by_name["read_file"]["client_hints"] == {"include": True}
    assert by_name["list_directory"]["tags"] == ["directory", "filesystem", "read"]
