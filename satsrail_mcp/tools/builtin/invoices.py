from typing import Annotated, Any
from urllib.parse import quote

from pydantic import Field, StrictInt, StrictStr

from satsrail_mcp.services.satsrail import SatsRailClient
from satsrail_mcp.tools.base import ToolArguments, ToolDefinition, format_json
from satsrail_mcp.tools.builtin.orders import PaymentMethod


class InvoiceArguments(ToolArguments):
    invoice_id: StrictStr = Field(description="Invoice UUID")


class GenerateInvoiceArguments(ToolArguments):
    order_id: StrictStr = Field(description="Order UUID")
    payment_method: PaymentMethod = Field(default="lightning", description="Payment method")
    required_confirmations: Annotated[StrictInt, Field(ge=1, le=6)] | None = Field(
        default=None,
        description="Required confirmations for on-chain (1-6)",
    )


class GetInvoiceTool:
    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="get_invoice",
            description="Get invoice details including the Lightning bolt11 string and payment address.",
            arguments=InvoiceArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        data = await self._client.call("GET", f"/invoices/{quote(kwargs['invoice_id'], safe='')}")
        return format_json(data)


class CheckInvoiceStatusTool:
    """
    Ask SatsRail to re-check an invoice against the Lightning node.
    The server may update the invoice as a side effect, so results are
    never cached.
    """

    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="check_invoice_status",
            description=(
                "Check the real-time payment status of an invoice. "
                "Triggers a fresh check against the Lightning node."
            ),
            arguments=InvoiceArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        path = f"/invoices/{quote(kwargs['invoice_id'], safe='')}/status"
        data = await self._client.call("GET", path)
        return format_json(data)


class GenerateInvoiceTool:
    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="generate_invoice",
            description="Generate a new invoice for an existing order.",
            arguments=GenerateInvoiceArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        body: dict[str, Any] = {
            "order_id": kwargs["order_id"],
            "payment_method": kwargs["payment_method"],
        }
        if kwargs.get("required_confirmations"):
            body["required_confirmations"] = kwargs["required_confirmations"]

        data = await self._client.call("POST", "/invoices/generate", body)
        return format_json(data)
