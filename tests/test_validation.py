from typing import Annotated, Literal

import pytest
from pydantic import Field, StrictBool, StrictInt, StrictStr

from satsrail_mcp.tools.base import ToolArguments, ToolDefinition, Url
from satsrail_mcp.tools.validation import ToolInputError, validate_arguments


class Line(ToolArguments):
    name: StrictStr
    qty: StrictInt = 1


class SampleArguments(ToolArguments):
    amount: StrictInt = Field(gt=0)
    currency: StrictStr = "usd"
    confirmations: Annotated[StrictInt, Field(ge=1, le=6)] | None = None
    method: Literal["lightning", "onchain"] = "lightning"
    url: Url | None = None
    flag: StrictBool = True
    lines: list[Line] | None = None
    tags: dict[str, StrictStr] | None = None


DEFINITION = ToolDefinition(name="sample", description="Sample tool", arguments=SampleArguments)


def failing_fields(arguments):
    with pytest.raises(ToolInputError) as exc:
        validate_arguments(DEFINITION, arguments)
    return exc.value.fields


def test_defaults_applied():
    result = validate_arguments(DEFINITION, {"amount": 100})
    assert result == {"amount": 100, "currency": "usd", "method": "lightning", "flag": True}


def test_unknown_keys_dropped():
    result = validate_arguments(DEFINITION, {"amount": 1, "bogus": "x"})
    assert "bogus" not in result


def test_unset_optionals_left_out():
    result = validate_arguments(DEFINITION, {"amount": 1, "url": None})
    assert "url" not in result
    assert "confirmations" not in result


def test_missing_required():
    assert failing_fields({}) == ["amount"]
    assert failing_fields(None) == ["amount"]


def test_positive_integer():
    assert failing_fields({"amount": 0}) == ["amount"]


def test_numeric_strings_rejected():
    assert failing_fields({"amount": "5"}) == ["amount"]


def test_bool_is_not_integer():
    assert failing_fields({"amount": True}) == ["amount"]


def test_bounds():
    assert failing_fields({"amount": 1, "confirmations": 7}) == ["confirmations"]
    assert failing_fields({"amount": 1, "confirmations": 0}) == ["confirmations"]
    assert validate_arguments(DEFINITION, {"amount": 1, "confirmations": 6})["confirmations"] == 6


def test_enum():
    assert failing_fields({"amount": 1, "method": "paypal"}) == ["method"]


def test_url_format():
    assert failing_fields({"amount": 1, "url": "not a url"}) == ["url"]
    result = validate_arguments(DEFINITION, {"amount": 1, "url": "https://shop.example/ok"})
    assert result["url"] == "https://shop.example/ok"


def test_url_schema_declares_format():
    url_schema = DEFINITION.input_schema()["properties"]["url"]
    assert {"type": "string", "format": "uri"} in url_schema["anyOf"]


def test_boolean_type():
    assert failing_fields({"amount": 1, "flag": "yes"}) == ["flag"]


def test_nested_items_defaults_and_errors():
    result = validate_arguments(DEFINITION, {"amount": 1, "lines": [{"name": "Tea"}]})
    assert result["lines"] == [{"name": "Tea", "qty": 1}]

    assert failing_fields({"amount": 1, "lines": [{"qty": 2}, "oops"]}) == [
        "lines[0].name",
        "lines[1]",
    ]


def test_string_map():
    assert validate_arguments(DEFINITION, {"amount": 1, "tags": {"a": "b"}})["tags"] == {"a": "b"}
    assert failing_fields({"amount": 1, "tags": {"a": 1}}) == ["tags.a"]


def test_all_problems_reported():
    assert failing_fields({"amount": -1, "flag": 1}) == ["amount", "flag"]


def test_error_message_names_tool_and_field():
    with pytest.raises(ToolInputError, match="Invalid arguments for 'sample': amount: "):
        validate_arguments(DEFINITION, {})


def test_non_object_arguments():
    assert failing_fields(["amount"]) == ["arguments"]
