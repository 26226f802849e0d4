"""toolshelf: a registry of LLM-callable tools for editor integrations."""

from toolshelf.tools import (
    ToolDefinition,
    ToolRegistry,
    ToolSpec,
    build_registry,
    build_tool,
    tool,
)

__version__ = "0.1.0"

__all__ = [
    "ToolDefinition",
    "ToolRegistry",
    "ToolSpec",
    "build_registry",
    "build_tool",
    "tool",
]
