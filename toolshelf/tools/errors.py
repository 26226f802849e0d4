from __future__ import annotations

__all__ = ["ToolRegistryError", "DuplicateToolError", "ToolArgumentError"]


class ToolRegistryError(Exception):
    """Base class for errors raised by the tool layer itself."""


class DuplicateToolError(ToolRegistryError):
    """A tool name was registered twice on a strict registry."""

    def __init__(self, name: str):
        super().__init__(f"Tool already registered: {name}")
        self.name = name


class ToolArgumentError(ToolRegistryError):
    """Named arguments do not match a tool's declared parameters."""

    def __init__(
        self,
        tool: str,
        missing: list[str] | None = None,
        unexpected: list[str] | None = None,
    ):
        self.tool = tool
        self.missing = missing or []
        self.unexpected = unexpected or []
        parts = []
        if self.missing:
            parts.append(f"missing: {', '.join(self.missing)}")
        if self.unexpected:
            parts.append(f"unexpected: {', '.join(self.unexpected)}")
        super().__init__(f"Invalid arguments for {tool} ({'; '.join(parts)})")
