#!/usr/bin/env python3
"""
Main / entry point for SB family of modem exporter.

"""
import asyncio
from os import getenv

import structlog
from aiohttp import ClientSession, ClientTimeout
from prometheus_client import start_http_server

from surfer.err.exceptions import ModemNotOkError, SignalParseError
from surfer.exporter.scrape import (
    do_modem_scrape,
    update_modem_metrics,
    update_signal_metrics,
)
from surfer.families import default_registry
from surfer.modem.base import Modem
from surfer.util.const import GATEWAY_URL, REQUEST_HEADERS, LogLevel

# cfg-file/arg-arse/clip is overkill for the few things that need to be configured.
# k8s makes it trivial to define env-vars so we'll just use that.
##
MODEM_BASE_URL = getenv("MODEM_BASE_URL", GATEWAY_URL)

# Parse a saved status page instead of talking to a modem. Handy for testing dashboards.
MODEM_FIXTURE_PATH = getenv("MODEM_FIXTURE_PATH", None)

# default prometheus_client implementation does not support setting the path, only the port.
METRICS_PORT = int(getenv("METRICS_PORT", "6666"))
METRICS_POLL_INTERVAL_SECONDS = int(getenv("METRICS_POLL_INTERVAL_SECONDS", "60"))
PROBE_RETRY_INTERVAL_SECONDS = int(getenv("PROBE_RETRY_INTERVAL_SECONDS", "30"))
FETCH_TIMEOUT_SECONDS = float(getenv("FETCH_TIMEOUT_SECONDS", "10"))


if getenv("LOG_LEVEL") not in LogLevel.__members__ or getenv("LOG_LEVEL") is None:
    print(f"Defaulting to {LogLevel.INFO} log level")
    log_level = LogLevel.INFO
else:
    log_level = LogLevel[getenv("LOG_LEVEL")]  # type: ignore
    print(f"Using log level {log_level.value}")


structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(log_level.value)
)

log = structlog.get_logger(__name__)


async def find_modem(client: ClientSession) -> Modem:
    """Keep probing until something answers with a page we recognize.

    Right after power-on the modem serves nothing (or a "please wait" page) for a while so not
        finding it is expected; just try again later.
    """
    registry = default_registry()
    while True:
        modem = await registry.resolve(
            client,
            fixture_path=MODEM_FIXTURE_PATH,
            base_url=MODEM_BASE_URL,
            timeout=FETCH_TIMEOUT_SECONDS,
        )
        if modem is not None:
            return modem
        log.info(
            f"Sleeping {PROBE_RETRY_INTERVAL_SECONDS} seconds before probing again"
        )
        await asyncio.sleep(PROBE_RETRY_INTERVAL_SECONDS)


async def main():
    """Main entry point."""
    log.info("Starting up")

    # In testing, server responds to requests on / and /metrics so there's no real
    #   need to allow customizing the path, I think.
    server, _ = start_http_server(port=METRICS_PORT)
    log.info("Metrics server started", server=server.server_address)

    log.debug("Setting up connection to modem...")
    # Only this loop ever polls the modem so there are never two requests in flight at once.
    async with ClientSession(
        headers=REQUEST_HEADERS,
        timeout=ClientTimeout(total=FETCH_TIMEOUT_SECONDS),
    ) as client:
        modem = await find_modem(client)
        log.info("Using modem", modem=repr(modem))
        update_modem_metrics(modem)

        while True:
            try:
                signal = await do_modem_scrape(
                    modem, client, timeout=FETCH_TIMEOUT_SECONDS
                )
                update_signal_metrics(signal)
            except SignalParseError as e:
                # Page came back but doesn't look like what we know. Usually firmware drift;
                #   keep polling in case it was a half-rendered page.
                log.error("Caught SignalParseError", error=e)
            except ModemNotOkError as e:
                # Got a non 200/OK back from the modem.
                log.error("Caught ModemNotOkError", error=e)
            # pylint: disable=broad-exception-caught
            except Exception as e:
                _e = "Unforeseen exception. Treating as non-fatal."
                log.error(_e, error=e)

            log.info(
                f"Sleeping {METRICS_POLL_INTERVAL_SECONDS} seconds before next poll"
            )
            await asyncio.sleep(METRICS_POLL_INTERVAL_SECONDS)


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
