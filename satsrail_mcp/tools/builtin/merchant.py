from typing import Any

from satsrail_mcp.services.satsrail import SatsRailClient
from satsrail_mcp.tools.base import ToolDefinition, format_json


class GetMerchantTool:
    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="get_merchant",
            description="Get the current merchant's profile and settings.",
        )

    async def execute(self, **kwargs: Any) -> str:
        data = await self._client.call("GET", "/merchant")
        return format_json(data)


class ListWalletsTool:
    def __init__(self, client: SatsRailClient) -> None:
        self._client = client

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="list_wallets",
            description="List the merchant's connected wallets.",
        )

    async def execute(self, **kwargs: Any) -> str:
        data = await self._client.call("GET", "/wallets")
        return format_json(data)
