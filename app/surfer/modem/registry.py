"""
Model autodetection.

The registry is just the ordered list of Modem subclasses we know about. Detection walks it in
    registration order and the first model whose fingerprint shows up in the page wins. Fingerprints
    are unique per model so order only matters for how many requests detection takes, but it is
    kept deterministic anyway.
"""

import asyncio
from os import PathLike
from pathlib import Path

import structlog
from aiohttp import ClientError, ClientSession

from surfer.err.exceptions import ModemNotOkError
from surfer.modem.base import Modem
from surfer.modem.fetch import fetch_page
from surfer.util.const import FETCH_TIMEOUT_SECONDS, GATEWAY_URL

log = structlog.get_logger(__name__)


class ModemRegistry:
    """Append-only, ordered collection of supported models."""

    def __init__(self):
        self._families: list[type[Modem]] = []

    def register(self, family: type[Modem]) -> type[Modem]:
        if family in self._families:
            raise ValueError(f"{family.name} is already registered")
        self._families.append(family)
        log.debug("Registered modem", model=family.name, position=len(self._families))
        return family

    @property
    def families(self) -> tuple[type[Modem], ...]:
        return tuple(self._families)

    def match(self, body: bytes) -> type[Modem] | None:
        """First registered model whose fingerprint is in `body`"""
        for family in self._families:
            if family.matches(body):
                return family
        return None

    async def resolve(
        self,
        cs: ClientSession | None,
        fixture_path: str | PathLike | None = None,
        base_url: str = GATEWAY_URL,
        timeout: float = FETCH_TIMEOUT_SECONDS,
    ) -> Modem | None:
        """Figure out which model we're talking to.

        With `fixture_path` the file is read once and fingerprinted; no request is ever made.
        Otherwise each model's status page is requested in turn, one at a time, and the first page
            that carries the matching fingerprint wins.
        Returns None when nothing matches. That's a normal outcome while the modem is booting so
            callers are expected to try again later.
        """
        if fixture_path:
            body = Path(fixture_path).read_bytes()
            if (family := self.match(body)) is not None:
                log.info("Fixture matched", model=family.name, path=str(fixture_path))
                return family(base_url=base_url, fixture=body)
            log.warning("Fixture did not match any known modem", path=str(fixture_path))
            return None

        if cs is None:
            raise ValueError(f"Probing {base_url} needs a ClientSession")

        for family in self._families:
            url = family.url_for(base_url)
            log.info("Probing", model=family.name, url=url)
            try:
                body = await fetch_page(cs, url, timeout=timeout)
            # A model that isn't there usually 404s, times out or refuses the connection.
            # None of that is an error from the point of view of detection.
            except (ClientError, asyncio.TimeoutError, ModemNotOkError) as e:
                log.info("Probe failed", model=family.name, url=url, error=repr(e))
                continue
            if family.matches(body):
                log.info("Found modem", model=family.name, url=url)
                return family(base_url=base_url)
            log.debug("Probe did not match", model=family.name, url=url, size=len(body))

        log.warning("No modem found", base_url=base_url, tried=[f.name for f in self._families])
        return None
