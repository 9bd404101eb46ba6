import logging
from typing import Any, Literal
from urllib.parse import quote, urlencode

from pydantic import Field, StrictBool, StrictInt, StrictStr

from satsrail_mcp.services.satsrail import SatsRailClient
from satsrail_mcp.tools.base import ToolArguments, ToolDefinition, format_json

logger = logging.getLogger(__name__)

PaymentMethod = Literal["lightning", "onchain", "auto"]
OrderStatus = Literal["pending", "invoice_generated", "paid", "cancelled", "refunded"]
Expandable = Literal["invoice", "payment", "merchant"]


class LineItem(ToolArguments):
    name: StrictStr
    price_cents: StrictInt
    qty: StrictInt = 1
    description: StrictStr | None = None


class CreateOrderArguments(ToolArguments):
    amount_cents: StrictInt = Field(gt=0, description="Amount in cents (e.g. 5000 = $50.00)")
    currency: StrictStr = Field(default="usd", description="Currency code (default: usd)")
    items: list[LineItem] | None = Field(default=None, description="Line items (optional)")
    generate_invoice: StrictBool = Field(
        default=True,
        description="Auto-generate a Lightning invoice (default: true)",
    )
    payment_method: PaymentMethod = Field(
        default="lightning",
        description="Payment method (default: lightning)",
    )
    metadata: dict[str, StrictStr] | None = Field(
        default=None,
        description="Arbitrary key-value metadata",
    )


class GetOrderArguments(ToolArguments):
    order_id: StrictStr = Field(description="Order UUID")
    expand: list[Expandable] | None = Field(default=None, description="Relations to expand")


class ListOrdersArguments(ToolArguments):
    status: OrderStatus | None = Field(default=None, description="Filter by status")
    page: StrictInt | None = Field(default=None, description="Page number")


class CancelOrderArguments(ToolArguments):
    order_id: StrictStr = Field(description="Order UUID to cancel")


class CreateOrderTool:
    """Create an order, optionally with a Lightning invoice attached."""

    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="create_order",
            description=(
                "Create a new payment order. Returns the order with a Lightning "
                "invoice if generate_invoice is true."
            ),
            arguments=CreateOrderArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        order: dict[str, Any] = {
            "total_amount_cents": kwargs["amount_cents"],
            "currency": kwargs["currency"],
        }
        if "items" in kwargs:
            order["items"] = kwargs["items"]
        if "metadata" in kwargs:
            order["metadata"] = kwargs["metadata"]

        body = {
            "order": order,
            "generate_invoice": kwargs["generate_invoice"],
            "payment_method": kwargs["payment_method"],
        }
        data = await self._client.call("POST", "/orders", body)
        return format_json(data)


class GetOrderTool:
    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="get_order",
            description="Get details of an existing order by ID.",
            arguments=GetOrderArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        path = f"/orders/{quote(kwargs['order_id'], safe='')}"
        expand: list[str] = kwargs.get("expand") or []
        if expand:
            path += "?expand=" + ",".join(expand)

        data = await self._client.call("GET", path)
        return format_json(data)


class ListOrdersTool:
    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="list_orders",
            description="List orders for the merchant. Optionally filter by status.",
            arguments=ListOrdersArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        params: dict[str, Any] = {}
        if kwargs.get("status"):
            params["q[status_eq]"] = kwargs["status"]
        if kwargs.get("page"):
            params["page"] = kwargs["page"]

        path = "/orders"
        if params:
            path += "?" + urlencode(params)

        data = await self._client.call("GET", path)
        return format_json(data)


class CancelOrderTool:
    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="cancel_order",
            description="Cancel a pending order.",
            arguments=CancelOrderArguments,
        )

    async def execute(self, **kwargs: Any) -> str:
        order_id: str = kwargs["order_id"]
        await self._client.call("DELETE", f"/orders/{quote(order_id, safe='')}")
        logger.info(f"Cancelled order {order_id}")
        return f"Order {order_id} cancelled."
