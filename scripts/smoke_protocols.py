import asyncio
import json
import os
import sys

"""Smoke run against the live DefiLlama API.
Fetches /protocols with settings from the environment and prints a short summary.
"""


def run():
    from defillama_client import DefiLlamaClient, get_settings, parse_protocols
    from defillama_client.core.logging import init_logging

    settings = get_settings()
    init_logging(debug=settings.debug)
    client = DefiLlamaClient.from_settings(settings)

    records = asyncio.run(client.get_protocols())
    top = sorted(parse_protocols(records), key=lambda p: p.tvl or 0.0, reverse=True)[:5]
    print(
        json.dumps(
            {
                "count": len(records),
                "top_by_tvl": [{"id": p.id, "name": p.name, "tvl": p.tvl} for p in top],
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    run()
