from typing import Any

from pydantic import Field, StrictInt, StrictStr

from satsrail_mcp.services.satsrail import SatsRailClient
from satsrail_mcp.tools.base import ToolArguments, ToolDefinition, Url, format_json


class CreateCheckoutSessionArguments(ToolArguments):
    amount_cents: StrictInt = Field(gt=0, description="Amount in cents")
    currency: StrictStr = Field(default="usd", description="Currency code")
    success_url: Url | None = Field(default=None, description="Redirect URL after successful payment")
    cancel_url: Url | None = Field(default=None, description="Redirect URL if customer cancels")


class CreateCheckoutSessionTool:
    """Create a hosted checkout page the customer can visit to pay."""

    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="create_checkout_session",
            description=(
                "Create a hosted checkout session. Returns a checkout URL the "
                "customer can visit to pay."
            ),
            arguments=CreateCheckoutSessionArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        session: dict[str, Any] = {
            "amount_cents": kwargs["amount_cents"],
            "currency": kwargs["currency"],
        }
        for key in ("success_url", "cancel_url"):
            if kwargs.get(key):
                session[key] = kwargs[key]

        data = await self._client.call("POST", "/checkout_sessions", {"checkout_session": session})
        return format_json(data)
