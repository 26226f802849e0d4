from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from toolshelf.config.constants import DEFAULT_CATEGORY
from toolshelf.utils.logger import tool_call_log, tools_logger

from .errors import ToolArgumentError

__all__ = [
    "ParamType",
    "ToolParameter",
    "ClientHints",
    "ToolDefinition",
    "ToolImplementation",
]

# Positional args in declared parameter order -> result text
ToolImplementation = Callable[..., str]


class ParamType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"


class ToolParameter(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: ParamType = ParamType.STRING
    description: str = ""

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type.value}
        if self.description:
            schema["description"] = self.description
        return schema


class ClientHints(BaseModel):
    """Consumer-specific metadata carried alongside a tool.

    Known hints are typed; anything else is kept as extra fields. The
    registry never reads these.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    confirm: bool | None = Field(
        None, description="Ask the user before executing the tool"
    )
    include: bool | None = Field(
        None, description="Offer the tool to the model by default"
    )

    def get(self, key: str, default: Any = None) -> Any:
        value = self.model_dump().get(key)
        return default if value is None else value


class ToolDefinition(BaseModel):
    """A named, described, invocable operation exposed to LLM clients.

    `implementation` is called with positional arguments matching
    `parameters` in declared order and returns a string, or raises.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str = ""
    parameters: tuple[ToolParameter, ...] = ()
    category: str = DEFAULT_CATEGORY
    tags: frozenset[str] = frozenset()
    implementation: ToolImplementation
    client_hints: ClientHints = Field(default_factory=ClientHints)
    identifier: str | None = None

    def parameter_names(self) -> list[str]:
        return [p.name for p in self.parameters]

    def args_schema(self) -> dict[str, Any]:
        """JSON Schema object describing the parameter list."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": self.parameter_names(),
        }

    def __call__(self, *args: Any) -> str:
        return self.implementation(*args)

    def invoke(self, arguments: Mapping[str, Any]) -> str:
        """Call the implementation with named arguments.

        Arguments are reordered into the declared positional order. Errors
        from the implementation propagate unchanged.
        """
        names = self.parameter_names()
        missing = [n for n in names if n not in arguments]
        unexpected = [k for k in arguments if k not in names]
        if missing or unexpected:
            raise ToolArgumentError(self.name, missing=missing, unexpected=unexpected)

        tool_call_log(tools_logger, self.name, names)
        return self.implementation(*(arguments[n] for n in names))

    def to_dict(self) -> dict[str, Any]:
        """JSON friendly view of the definition (implementation omitted)."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [p.model_dump(mode="json") for p in self.parameters],
            "category": self.category,
            "tags": sorted(self.tags),
            "client_hints": self.client_hints.model_dump(exclude_none=True),
        }
