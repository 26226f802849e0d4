"""Declarative construction of tool definitions.

A tool is declared once from a base identifier, a `ToolSpec` and an
implementation. The external name is derived from the identifier unless the
spec names it explicitly:

    READ_FILE = build_tool(
        "read-file",
        ToolSpec(
            description="Read a file",
            parameters=[("path", "string", "Path to the file")],
            category="filesystem",
        ),
        _read_file,
    )
    registry.register(READ_FILE)

or with the decorator form:

    @tool("read-file", description="Read a file", registry=registry)
    def read_file(path: str) -> str: ...
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from toolshelf.config.constants import DEFAULT_CATEGORY

from .definition import ClientHints, ToolDefinition, ToolImplementation, ToolParameter

if TYPE_CHECKING:
    from .registry import ToolRegistry

__all__ = ["ToolSpec", "build_tool", "derive_tool_name", "tool"]

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_]")


def derive_tool_name(identifier: str) -> str:
    """Map an internal identifier to a name every tool-calling protocol accepts."""
    return _UNSAFE_NAME_CHARS.sub("_", identifier)


def _coerce_parameter(value: Any) -> Any:
    # ("path", "string", "Path to read") / ("path", "string") / ("path",)
    if isinstance(value, tuple | list):
        keys = ("name", "type", "description")
        return dict(zip(keys, value, strict=False))
    return value


class ToolSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    description: str = ""
    parameters: list[ToolParameter] = Field(default_factory=list)
    category: str = DEFAULT_CATEGORY
    tags: frozenset[str] = frozenset()
    name: str | None = Field(None, description="Explicit external name")
    client_hints: ClientHints = Field(default_factory=ClientHints)

    @field_validator("parameters", mode="before")
    @classmethod
    def _parameters_from_tuples(cls, value: Any) -> Any:
        if isinstance(value, Iterable) and not isinstance(value, str | Mapping):
            return [_coerce_parameter(v) for v in value]
        return value

    @field_validator("client_hints", mode="before")
    @classmethod
    def _hints_from_mapping(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value


def build_tool(
    identifier: str,
    spec: ToolSpec | Mapping[str, Any],
    implementation: ToolImplementation,
) -> ToolDefinition:
    """Build a ToolDefinition from an identifier, a spec and an implementation."""
    if not isinstance(spec, ToolSpec):
        spec = ToolSpec.model_validate(spec)
    if not callable(implementation):
        raise TypeError(f"Tool implementation for {identifier!r} is not callable")

    name = spec.name if spec.name else derive_tool_name(identifier)
    if not name:
        raise ValueError("Tool needs a non-empty identifier or explicit name")

    return ToolDefinition(
        name=name,
        identifier=identifier,
        description=spec.description,
        parameters=tuple(spec.parameters),
        category=spec.category,
        tags=spec.tags,
        implementation=implementation,
        client_hints=spec.client_hints,
    )


def tool(
    identifier: str,
    *,
    registry: ToolRegistry | None = None,
    **spec_fields: Any,
) -> Callable[[ToolImplementation], ToolDefinition]:
    """Decorator form of build_tool; optionally registers the result."""

    def decorator(func: ToolImplementation) -> ToolDefinition:
        fields = dict(spec_fields)
        if not fields.get("description") and func.__doc__:
            fields["description"] = inspect.cleandoc(func.__doc__)
        definition = build_tool(identifier, ToolSpec.model_validate(fields), func)
        if registry is not None:
            registry.register(definition)
        return definition

    return decorator
