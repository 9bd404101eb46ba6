from typing import Any

from pydantic import ValidationError

from satsrail_mcp.tools.base import ToolDefinition


class ToolInputError(ValueError):
    """Arguments did not satisfy a tool's argument model."""

    def __init__(self, tool_name: str, problems: list[tuple[str, str]]) -> None:
        self.tool_name = tool_name
        self.problems = problems
        detail = "; ".join(f"{field}: {message}" for field, message in problems)
        super().__init__(f"Invalid arguments for '{tool_name}': {detail}")

    @property
    def fields(self) -> list[str]:
        return [field for field, _ in self.problems]


def _field_path(loc: tuple[int | str, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "arguments"


def validate_arguments(definition: ToolDefinition, arguments: dict[str, Any] | None) -> dict[str, Any]:
    """
    Validate arguments with the tool's model.
    Returns plain keyword arguments: defaults filled in, unset optionals left out.
    """
    try:
        parsed = definition.arguments.model_validate(arguments or {})
    except ValidationError as e:
        problems = [(_field_path(err["loc"]), err["msg"]) for err in e.errors()]
        raise ToolInputError(definition.name, problems) from e
    return parsed.model_dump(exclude_none=True)
