import pytest
from pydantic import ValidationError

from defillama_client.models import PROTOCOL_OPTIONAL_FIELDS, DefiLlamaProtocol, parse_protocols


def test_known_fields_are_typed():
    (p,) = parse_protocols(
        [
            {
                "id": "111",
                "name": "Uniswap",
                "tvl": 5000000000,
                "chains": ["Ethereum", "Arbitrum"],
                "chainTvls": {"Ethereum": 4.0e9, "Arbitrum": 1.0e9},
                "listedAt": 1600000000,
                "change_1h": None,
            }
        ]
    )
    assert p.id == "111"
    assert p.tvl == 5e9
    assert p.chains == ["Ethereum", "Arbitrum"]
    assert p.change_1h is None
    assert p.category is None


def test_unknown_fields_pass_through():
    raw = {"id": "7", "name": "Foo", "audits": "2", "oracles": ["Chainlink"]}
    p = DefiLlamaProtocol.model_validate(raw)

    assert p.model_extra == {"audits": "2", "oracles": ["Chainlink"]}
    assert p.as_dict() == raw


def test_required_fields():
    with pytest.raises(ValidationError):
        DefiLlamaProtocol.model_validate({"name": "no id"})


def test_optional_field_list_matches_model():
    for name in PROTOCOL_OPTIONAL_FIELDS:
        assert name in DefiLlamaProtocol.model_fields
    assert "id" not in PROTOCOL_OPTIONAL_FIELDS
