"""
Steps every model parser shares: raw bytes -> soup, find the data tables, fields -> Signal.
"""

from typing import Any

import structlog
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from surfer.err.exceptions import DocumentParseError, TableLayoutError
from surfer.modem.signal import Channel, Downstream, Signal, Upstream

log = structlog.get_logger(__name__)


def parse_document(raw: bytes) -> BeautifulSoup:
    try:
        return BeautifulSoup(raw, "html.parser")
    except ParserRejectedMarkup as e:
        raise DocumentParseError(f"Unable to parse status page: {e}", payload=raw[:256]) from e


def select_tables(soup: BeautifulSoup, selector: str, expected: int) -> list[Tag]:
    """All tables matching `selector`; anything other than exactly `expected` of them is fatal.

    Parsing whatever subset happens to be there would hand back plausible looking but wrong data.
    """
    tables = soup.select(selector)
    log.debug("Tables", selector=selector, count=len(tables))
    if len(tables) != expected:
        raise TableLayoutError(f"Found {len(tables)} {selector!r} tables, expected {expected}")
    return tables


def build_signal(
    downstream: dict[Channel, dict[str, Any]],
    upstream: dict[Channel, dict[str, Any]],
) -> Signal:
    """Freeze parsed fields into a Signal. Both directions must have produced channels."""
    if not downstream:
        raise TableLayoutError("No downstream channels found")
    if not upstream:
        raise TableLayoutError("No upstream channels found")
    return Signal(
        downstream={ch: Downstream(**fields) for ch, fields in downstream.items()},
        upstream={ch: Upstream(**fields) for ch, fields in upstream.items()},
    )
