"""Tool layer for toolshelf.

Declarative tool definitions, a registry that stores them, and the builtin
filesystem tools. Consumers pull definitions from a registry and drive
invocation themselves.
"""

from .build_registry import build_registry
from .builder import ToolSpec, build_tool, derive_tool_name, tool
from .definition import ClientHints, ParamType, ToolDefinition, ToolParameter
from .errors import DuplicateToolError, ToolArgumentError, ToolRegistryError
from .registry import ToolRegistry

__all__ = [
    "ClientHints",
    "DuplicateToolError",
    "ParamType",
    "ToolArgumentError",
    "ToolDefinition",
    "ToolParameter",
    "ToolRegistry",
    "ToolRegistryError",
    "ToolSpec",
    "build_registry",
    "build_tool",
    "derive_tool_name",
    "tool",
]
