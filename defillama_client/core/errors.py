"""Exceptions raised by the DefiLlama client.

Only the last failure of a call reaches the caller; the message is the useful part.
"""

from typing import Optional


class DefiLlamaError(Exception):
    pass


class TransientTransportError(DefiLlamaError):
    """Network failure or per-attempt timeout."""


class HttpStatusError(DefiLlamaError):
    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(body or f"HTTP {status_code}")


class ResponseDecodeError(DefiLlamaError):
    """Response body is not valid JSON."""


class ShapeError(DefiLlamaError):
    """Valid JSON with the wrong top-level structure. Never retried."""


RETRYABLE_ERRORS = (TransientTransportError, HttpStatusError, ResponseDecodeError)


def describe(exc: Optional[BaseException]) -> str:
    if exc is None:
        return "DefiLlama request failed"
    return f"{type(exc).__name__}: {exc}"
