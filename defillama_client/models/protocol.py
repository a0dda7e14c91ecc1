from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

# Optional keys DefiLlama documents for /protocols entries; anything else passes through.
PROTOCOL_OPTIONAL_FIELDS = (
    "address",
    "symbol",
    "url",
    "description",
    "chain",
    "logo",
    "category",
    "chains",
    "module",
    "twitter",
    "listedAt",
    "slug",
    "tvl",
    "chainTvls",
    "change_1h",
    "change_1d",
    "change_7d",
)


class DefiLlamaProtocol(BaseModel):
    """One entry of GET /protocols with typed access to the known fields.

    Unknown keys are kept as extras so upstream schema additions survive a round trip.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    address: Optional[str] = None
    symbol: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    chain: Optional[str] = None
    logo: Optional[str] = None
    category: Optional[str] = None
    chains: Optional[List[str]] = None
    module: Optional[str] = None
    twitter: Optional[str] = None
    listedAt: Optional[int] = None
    slug: Optional[str] = None
    tvl: Optional[float] = None
    chainTvls: Optional[Dict[str, float]] = None
    change_1h: Optional[float] = None
    change_1d: Optional[float] = None
    change_7d: Optional[float] = None

    def as_dict(self) -> Dict[str, Any]:
        """Original mapping shape: fields never set are left out."""
        data = self.model_dump(exclude_unset=True)
        data.update(self.model_extra or {})
        return data


def parse_protocols(records: Iterable[Dict[str, Any]]) -> List[DefiLlamaProtocol]:
    return [DefiLlamaProtocol.model_validate(r) for r in records]
