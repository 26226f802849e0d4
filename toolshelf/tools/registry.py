"""Registry of tool definitions.

The registry only stores definitions and answers queries; it never invokes
a tool. Consumers pull definitions (all, or by category) and map them onto
their own tool-registration call.

Registration is append-only. Duplicate names are kept in registration order
unless the registry is strict, in which case they are rejected.
"""

from __future__ import annotations

from collections.abc import Iterator

from toolshelf.config import settings
from toolshelf.utils.logger import tools_logger

from .definition import ToolDefinition
from .errors import DuplicateToolError


class ToolRegistry:
    """Ordered collection of ToolDefinitions.

    Not thread-safe: registration happens during sequential load and reads
    are synchronous.
    """

    def __init__(self, strict: bool | None = None) -> None:
        self._tools: list[ToolDefinition] = []
        self.strict = settings.strict_tool_names if strict is None else strict

    def register(self, definition: ToolDefinition) -> None:
        if self.has_tool(definition.name):
            if self.strict:
                raise DuplicateToolError(definition.name)
            tools_logger.warning(
                "Duplicate tool name registered", tool=definition.name
            )
        self._tools.append(definition)
        tools_logger.debug(
            "Tool registered", tool=definition.name, category=definition.category
        )

    def get_all(self) -> list[ToolDefinition]:
        return list(self._tools)

    def get_by_category(self, category: str) -> list[ToolDefinition]:
        return [t for t in self._tools if t.category == category]

    def get(self, name: str) -> ToolDefinition | None:
        """Return the most recently registered definition with this name."""
        for definition in reversed(self._tools):
            if definition.name == name:
                return definition
        return None

    def has_tool(self, name: str) -> bool:
        return any(t.name == name for t in self._tools)

    def names(self) -> list[str]:
        return [t.name for t in self._tools]

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(t.category for t in self._tools))

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(list(self._tools))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_tool(name)
