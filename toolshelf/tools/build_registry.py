from __future__ import annotations

from .registry import ToolRegistry


def build_registry(
    include: set[str] | None = None,
    exclude: set[str] | None = None,
    strict: bool | None = None,
) -> ToolRegistry:
    """Build a tool registry from the static builtin TOOL_DEFINITIONS.

    Each call returns a fresh registry. `include` and `exclude` filter by
    external tool name; an empty include set means "everything".
    """
    registry = ToolRegistry(strict=strict)

    include = include or set()
    exclude = exclude or set()

    from toolshelf.tools.builtin import TOOL_DEFINITIONS as BUILTIN_TOOL_DEFINITIONS

    for definition in BUILTIN_TOOL_DEFINITIONS:
        if include and definition.name not in include:
            continue
        if definition.name in exclude:
            continue
        registry.register(definition)

    return registry
