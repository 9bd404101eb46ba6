from typing import Any

import pytest

from satsrail_mcp.tools.catalog import build_registry


class RecordingClient:
    """Stands in for SatsRailClient and records every call."""

    def __init__(self, response: Any = None) -> None:
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []
        self.response = {"ok": True} if response is None else response

    async def call(self, method: str, path: str, body: dict[str, Any] | None = None) -> Any:
        self.calls.append((method, path, body))
        return self.response


@pytest.fixture
def client():
    return RecordingClient()


@pytest.fixture
def registry(client):
    return build_registry(client)
