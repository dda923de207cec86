#!/usr/bin/env python3
"""
Detect the modem, poll it once and print the parsed Signal as JSON.

Mostly useful when adding a new captured page under tests/testdata: point MODEM_FIXTURE_PATH at it
    and compare the output with what the modem UI shows.
"""
import asyncio
import json
import sys
from os import getenv

import structlog
from aiohttp import ClientSession

from surfer.families import default_registry
from surfer.util.const import GATEWAY_URL, REQUEST_HEADERS

# stdout is reserved for the JSON
structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))

log = structlog.get_logger(__name__)


async def dump(base_url: str, fixture_path: str | None) -> int:
    async with ClientSession(headers=REQUEST_HEADERS) as client:
        modem = await default_registry().resolve(
            client, fixture_path=fixture_path, base_url=base_url
        )
        if modem is None:
            log.error("No modem found", base_url=base_url, fixture_path=fixture_path)
            return 1
        signal = await modem.status(client)

    json.dump({"model": modem.name, **signal.as_dict()}, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")
    return 0


def run():
    sys.exit(
        asyncio.run(
            dump(
                getenv("MODEM_BASE_URL", GATEWAY_URL),
                getenv("MODEM_FIXTURE_PATH", None),
            )
        )
    )


if __name__ == "__main__":
    run()
