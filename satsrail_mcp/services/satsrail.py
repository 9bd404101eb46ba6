import json
import logging
from typing import Any

import httpx

from satsrail_mcp.config.loader import normalize_base_url
from satsrail_mcp.config.schema import ApiConfig

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class RequestError(Exception):
    pass


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Not valid JSON: {name}")


def _parse_body(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return {"raw": text}


def _error_message(data: Any, status_code: int) -> str:
    """Pick the most specific error text the API returned."""
    if isinstance(data, dict):
        for key in ("error", "message"):
            if data.get(key):
                return str(data[key])
    return f"HTTP {status_code}"


class SatsRailClient:
    """Authenticated JSON bridge to the SatsRail REST API.

    Every call is a single attempt: no retries, no caching. Timeouts and
    redirects follow httpx defaults.
    """

    def __init__(
        self,
        config: ApiConfig,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = normalize_base_url(config.base_url)
        self._api_key = api_key
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, path: str) -> str:
        return f"{self._base_url}{API_PREFIX}{path}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def call(self, method: str, path: str, body: dict[str, Any] | None = None) -> Any:
        """
        Perform one request and return the parsed JSON body.
        Non-JSON bodies come back as {"raw": text}.
        Raises RequestError on network failure or a non-2xx status.
        """
        url = self.url_for(path)
        content = json.dumps(body) if body is not None else None

        logger.debug(f"{method} {url}")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(
                    method,
                    url,
                    content=content,
                    headers=self._headers(),
                )
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise RequestError(f"Request to {method} {path} failed: {e}") from e

        data = _parse_body(response.text)

        if not response.is_success:
            message = _error_message(data, response.status_code)
            logger.warning(f"{method} {path} returned {response.status_code}: {message}")
            raise RequestError(message)

        return data
