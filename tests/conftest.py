import asyncio
from typing import Callable, List

import httpx
import pytest

from defillama_client.core.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class Recorder:
    """Collects backoff delays (seconds) and seen requests."""

    def __init__(self) -> None:
        self.delays: List[float] = []
        self.requests: List[httpx.Request] = []

    async def sleep(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture()
def recorder():
    return Recorder()


@pytest.fixture()
def scripted_transport(recorder) -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport that replays one scripted step per attempt.

    A step is an httpx.Response, an exception instance to raise, or an async
    callable taking the request.
    """

    def factory(*steps):
        script = list(steps)

        async def handler(request: httpx.Request) -> httpx.Response:
            recorder.requests.append(request)
            step = script.pop(0) if len(script) > 1 else script[0]
            if isinstance(step, Exception):
                raise step
            if callable(step):
                return await step(request)
            return _fresh(step)

        return httpx.MockTransport(handler)

    return factory


def _fresh(template: httpx.Response) -> httpx.Response:
    # a Response cannot be handed to the client twice
    return httpx.Response(template.status_code, headers=template.headers, content=template.content)


def slow_response(seconds: float, response: httpx.Response):
    async def _respond(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(seconds)
        return _fresh(response)

    return _respond


@pytest.fixture()
def slow():
    return slow_response
