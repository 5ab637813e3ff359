"""Tool contract shared by every tool the host can invoke.

A tool never raises across its boundary. ``Tool.run`` returns a ``ToolResult``
that carries either the result payload or a short error message, and
``invoke_with_callback`` adapts that to hosts using the ``(error, result)``
callback convention.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Protocol, Tuple, Type

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred during tool execution"


class ToolInputAccessor(Protocol):
    def tool_input(self) -> Mapping[str, Any]: ...


class ToolContext(Protocol):
    get: ToolInputAccessor


Callback = Callable[[Optional[Dict[str, str]], Optional[Dict[str, Any]]], None]


@dataclass(frozen=True)
class ToolResult:
    result: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, result: Dict[str, Any]) -> "ToolResult":
        return cls(result=result)

    @classmethod
    def failure(cls, exc: BaseException | str | None = None) -> "ToolResult":
        if isinstance(exc, ValidationError) and exc.errors():
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            message = f"{location}: {first['msg']}" if location else first["msg"]
        else:
            message = str(exc) if exc is not None else ""
        return cls(error=message or GENERIC_ERROR)

    def as_callback_args(self) -> Tuple[Optional[Dict[str, str]], Optional[Dict[str, Any]]]:
        if self.ok:
            return None, self.result
        return {"error": self.error}, None


@dataclass(frozen=True)
class Tool:
    """An invocable tool with its declared schemas.

    ``invoke`` receives the input validated against ``input_schema`` and
    returns a JSON-shaped dict that must validate against ``output_schema``.
    Tools without both schemas can still run but are left out of the manifest.
    """

    name: str
    invoke: Callable[..., Awaitable[Dict[str, Any]]]
    description: Optional[str] = None
    input_schema: Optional[Type[BaseModel]] = None
    output_schema: Optional[Type[BaseModel]] = None

    async def run(self, tool_input: Any, **kwargs: Any) -> ToolResult:
        try:
            arguments = (
                self.input_schema.model_validate(tool_input) if self.input_schema else tool_input
            )
            result = await self.invoke(arguments, **kwargs)
            if self.output_schema is not None:
                # Coerced values (e.g. numeric strings) must match the published schema.
                result = self.output_schema.model_validate(result).model_dump(mode="json")
        except Exception as exc:
            logger.exception("error in tool execution: %s", self.name)
            return ToolResult.failure(exc)
        return ToolResult.success(result)


async def invoke_with_callback(tool: Tool, context: ToolContext, callback: Callback, **kwargs: Any) -> None:
    """Run ``tool`` for a callback-style host; ``callback`` fires exactly once."""
    try:
        tool_input = context.get.tool_input()
    except Exception as exc:
        logger.exception("could not read tool input for %s", tool.name)
        outcome = ToolResult.failure(exc)
    else:
        outcome = await tool.run(tool_input, **kwargs)
    callback(*outcome.as_callback_args())
