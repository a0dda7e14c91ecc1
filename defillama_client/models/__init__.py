"""Pydantic models for DefiLlama API payloads."""

from .protocol import PROTOCOL_OPTIONAL_FIELDS, DefiLlamaProtocol, parse_protocols

__all__ = [
    "PROTOCOL_OPTIONAL_FIELDS",
    "DefiLlamaProtocol",
    "parse_protocols",
]
