from satsrail_mcp.services.satsrail import SatsRailClient
from satsrail_mcp.tools.builtin.checkout_sessions import CreateCheckoutSessionTool
from satsrail_mcp.tools.builtin.invoices import (
    CheckInvoiceStatusTool,
    GenerateInvoiceTool,
    GetInvoiceTool,
)
from satsrail_mcp.tools.builtin.merchant import GetMerchantTool, ListWalletsTool
from satsrail_mcp.tools.builtin.orders import (
    CancelOrderTool,
    CreateOrderTool,
    GetOrderTool,
    ListOrdersTool,
)
from satsrail_mcp.tools.builtin.payments import GetPaymentTool, ListPaymentsTool
from satsrail_mcp.tools.registry import ToolRegistry

TOOL_CLASSES = [
    CreateOrderTool,
    GetOrderTool,
    ListOrdersTool,
    CancelOrderTool,
    GetInvoiceTool,
    CheckInvoiceStatusTool,
    GenerateInvoiceTool,
    ListPaymentsTool,
    GetPaymentTool,
    CreateCheckoutSessionTool,
    GetMerchantTool,
    ListWalletsTool,
]


def build_registry(client: SatsRailClient) -> ToolRegistry:
    """Register every SatsRail tool against a shared client."""
    registry = ToolRegistry()
    for tool_cls in TOOL_CLASSES:
        registry.register(tool_cls(client))
    return registry
