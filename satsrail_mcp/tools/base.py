import json
from dataclasses import dataclass
from typing import Annotated, Any, Protocol
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict, StrictStr, WithJsonSchema


class ToolArguments(BaseModel):
    """Base for tool argument models. Unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")


class NoArguments(ToolArguments):
    pass


def _require_url(value: str) -> str:
    parsed = urlparse(value)
    if not (parsed.scheme and parsed.netloc):
        raise ValueError(f"invalid url '{value}'")
    return value


Url = Annotated[
    StrictStr,
    AfterValidator(_require_url),
    WithJsonSchema({"type": "string", "format": "uri"}),
]


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    arguments: type[ToolArguments] = NoArguments

    def input_schema(self) -> dict[str, Any]:
        return self.arguments.model_json_schema()


class Tool(Protocol):
    @property
    def definition(self) -> ToolDefinition: ...

    async def execute(self, **kwargs: Any) -> str: ...


def format_json(data: Any) -> str:
    """Pretty-print an API response for the agent."""
    return json.dumps(data, indent=2, ensure_ascii=False)
