from typing import Any
from urllib.parse import quote, urlencode

from pydantic import Field, StrictInt, StrictStr

from satsrail_mcp.services.satsrail import SatsRailClient
from satsrail_mcp.tools.base import ToolArguments, ToolDefinition, format_json


class ListPaymentsArguments(ToolArguments):
    confirmed_after: StrictStr | None = Field(
        default=None,
        description="Filter payments confirmed on or after this date (ISO 8601, e.g. 2026-01-01)",
    )
    confirmed_before: StrictStr | None = Field(
        default=None,
        description="Filter payments confirmed on or before this date (ISO 8601)",
    )
    page: StrictInt | None = Field(default=None, description="Page number")


class GetPaymentArguments(ToolArguments):
    payment_id: StrictStr = Field(description="Payment UUID")


class ListPaymentsTool:
    """List confirmed payments. Date filters are forwarded as given."""

    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="list_payments",
            description="List confirmed payments. Optionally filter by date range.",
            arguments=ListPaymentsArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        params: dict[str, Any] = {}
        if kwargs.get("confirmed_after"):
            params["q[confirmed_at_gteq]"] = kwargs["confirmed_after"]
        if kwargs.get("confirmed_before"):
            params["q[confirmed_at_lteq]"] = kwargs["confirmed_before"]
        if kwargs.get("page"):
            params["page"] = kwargs["page"]

        path = "/payments"
        if params:
            path += "?" + urlencode(params)

        data = await self._client.call("GET", path)
        return format_json(data)


class GetPaymentTool:
    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="get_payment",
            description="Get details of a specific payment.",
            arguments=GetPaymentArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        data = await self._client.call("GET", f"/payments/{quote(kwargs['payment_id'], safe='')}")
        return format_json(data)
