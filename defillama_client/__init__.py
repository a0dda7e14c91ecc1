"""Minimal async client for the DefiLlama /protocols endpoint."""

from .core.config import ClientConfig, Settings, get_settings
from .core.errors import (
    DefiLlamaError,
    HttpStatusError,
    ResponseDecodeError,
    ShapeError,
    TransientTransportError,
)
from .models import DefiLlamaProtocol, parse_protocols
from .services.defillama import DefiLlamaClient, fetch_protocols

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "Settings",
    "get_settings",
    "DefiLlamaError",
    "HttpStatusError",
    "ResponseDecodeError",
    "ShapeError",
    "TransientTransportError",
    "DefiLlamaProtocol",
    "parse_protocols",
    "DefiLlamaClient",
    "fetch_protocols",
]
