"""
What every supported modem model looks like to the rest of the program.

A model is a Modem subclass that fills in a handful of class attributes and points `parse` at its
    page parser. Instances are either live (fetch from the gateway every call) or fixture backed
    (re-parse the same captured page every call). Both go through the same `parse` so tests against
    captured pages exercise exactly what runs against a real modem.
"""

from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import ClassVar

import structlog
from aiohttp import ClientSession

from surfer.modem.fetch import fetch_page
from surfer.modem.signal import Signal
from surfer.util.const import FETCH_TIMEOUT_SECONDS, GATEWAY_URL

log = structlog.get_logger(__name__)


class Modem(ABC):
    """One supported modem model."""

    # Human readable model, e.g. "SB8200"
    name: ClassVar[str]
    # Path of the signal/status page on the gateway
    signal_path: ClassVar[str]
    # Literal chunk of markup only this model's status page contains
    fingerprint: ClassVar[bytes]

    def __init__(self, base_url: str = GATEWAY_URL, fixture: bytes | None = None):
        self.base_url = base_url.rstrip("/")
        self._fixture = fixture

    @staticmethod
    @abstractmethod
    def parse(raw: bytes) -> Signal:
        """Turn a raw status page into a Signal or raise SignalParseError."""

    @classmethod
    def matches(cls, body: bytes) -> bool:
        """Does `body` look like this model's status page?"""
        return cls.fingerprint in body

    @classmethod
    def from_fixture(cls, path: str | PathLike) -> "Modem":
        """Instance that parses the page saved at `path` instead of talking to a modem."""
        return cls(fixture=Path(path).read_bytes())

    @classmethod
    def url_for(cls, base_url: str = GATEWAY_URL) -> str:
        return base_url.rstrip("/") + cls.signal_path

    @property
    def signal_url(self) -> str:
        return self.url_for(self.base_url)

    @property
    def is_fixture(self) -> bool:
        return self._fixture is not None

    async def status(
        self,
        cs: ClientSession | None = None,
        timeout: float = FETCH_TIMEOUT_SECONDS,
    ) -> Signal:
        """Fetch (or replay) the status page and parse it.

        Fixture backed instances never touch `cs`.
        Fetch errors and parse errors both propagate; there is no partial Signal.
        """
        if self._fixture is not None:
            log.debug("Parsing fixture", model=self.name, size=len(self._fixture))
            return self.parse(self._fixture)

        if cs is None:
            raise ValueError(f"{self.name} needs a ClientSession to fetch {self.signal_url}")
        raw = await fetch_page(cs, self.signal_url, timeout=timeout)
        return self.parse(raw)

    def __repr__(self):
        source = "fixture" if self.is_fixture else self.signal_url
        return f"{self.__class__.__name__}({source})"
