from __future__ import annotations

"""DefiLlama REST client.

Holds only immutable configuration, so one instance can serve concurrent callers;
each call opens and closes its own httpx.AsyncClient.
"""
import asyncio
from typing import Any, Dict, List, Optional

import httpx

from defillama_client.core.config import ClientConfig, Settings, get_settings
from defillama_client.core.errors import ShapeError
from defillama_client.core.logging import call_context
from defillama_client.services.http_client import Sleep, get_json

PROTOCOLS_PATH = "/protocols"


class DefiLlamaClient:
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self._config = config or ClientConfig()
        self._transport = transport
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "DefiLlamaClient":
        settings = settings or get_settings()
        return cls(settings.client_config(), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    async def get_protocols(self) -> List[Dict[str, Any]]:
        """GET /protocols; the list is returned exactly as received."""
        url = self._url(PROTOCOLS_PATH)
        with call_context():
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout_ms / 1000),
                transport=self._transport,
            ) as client:
                data = await get_json(
                    client,
                    url,
                    timeout_ms=self._config.timeout_ms,
                    retries=self._config.retries,
                    sleep=self._sleep,
                )
        if not isinstance(data, list):
            raise ShapeError(f"DefiLlama {PROTOCOLS_PATH}: expected an array response")
        return data


def fetch_protocols(config: Optional[ClientConfig] = None, **kwargs: Any) -> List[Dict[str, Any]]:
    """Blocking wrapper around DefiLlamaClient.get_protocols for code without an event loop."""
    return asyncio.run(DefiLlamaClient(config, **kwargs).get_protocols())
