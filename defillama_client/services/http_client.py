from __future__ import annotations

"""GET JSON with bounded retries and a hard per-attempt deadline.

Every failure kind (transport, timeout, non-2xx, bad JSON) shares one linear backoff
policy; callers decide what to do with a decoded body of the wrong shape.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

import httpx

from defillama_client.core.errors import (
    RETRYABLE_ERRORS,
    DefiLlamaError,
    HttpStatusError,
    ResponseDecodeError,
    TransientTransportError,
    describe,
)

logger = logging.getLogger(__name__)

BACKOFF_STEP_MS = 200
JSON_HEADERS = {"Accept": "application/json"}

Sleep = Callable[[float], Awaitable[None]]


def backoff_ms(attempt: int) -> int:
    """Delay after failed attempt `attempt` (0-based) before the next one."""
    return BACKOFF_STEP_MS * (attempt + 1)


async def _attempt(client: httpx.AsyncClient, url: str) -> Any:
    try:
        resp = await client.get(url, headers=JSON_HEADERS)
    except httpx.HTTPError as e:
        raise TransientTransportError(str(e) or type(e).__name__) from e
    if not resp.is_success:
        raise HttpStatusError(resp.status_code, resp.text)
    try:
        return resp.json()
    except ValueError as e:  # JSONDecodeError / UnicodeDecodeError
        raise ResponseDecodeError(f"Invalid JSON from {url}: {e}") from e


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    timeout_ms: int,
    retries: int,
    sleep: Sleep = asyncio.sleep,
) -> Any:
    last_err: Optional[DefiLlamaError] = None
    for attempt in range(retries + 1):
        logger.debug("attempt start", extra={"attempt": attempt, "url": url})
        try:
            # wait_for cancels the in-flight request when the deadline fires
            return await asyncio.wait_for(_attempt(client, url), timeout=timeout_ms / 1000)
        except asyncio.TimeoutError:
            last_err = TransientTransportError(f"GET {url} timed out after {timeout_ms}ms")
        except RETRYABLE_ERRORS as e:
            last_err = e
        finally:
            logger.debug("attempt end", extra={"attempt": attempt, "url": url})

        if attempt == retries:
            break
        delay = backoff_ms(attempt)
        logger.warning(
            "attempt failed, retrying: %s",
            describe(last_err),
            extra={"attempt": attempt, "url": url, "delay_ms": delay},
        )
        await sleep(delay / 1000)

    logger.error(
        "giving up after %d attempt(s): %s",
        retries + 1,
        describe(last_err),
        extra={"url": url},
    )
    if last_err is None:
        raise DefiLlamaError(describe(None))
    raise last_err
