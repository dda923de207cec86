"""
Declarative table layouts shared by the model specific parsers.

The SB status pages come in two shapes:

  - row-per-attribute: the first data row lists the channel ids and every following row is one
        attribute (frequency, SNR, ...) with one column per channel. Older (SB6121 era) firmware.
  - row-per-channel: one row per channel with a fixed column per attribute. Newer firmware.

Neither shape has headers we can rely on (see the note about the SB8200's invalid HTML in the
    sb8200 parser) so we index by position.
Each model describes its tables as a tuple of Field()s and hands the table to one of the two
    parse functions below. When a firmware update moves things around, only the tuple changes.
"""

from dataclasses import dataclass
from typing import Any, Callable

import structlog
from bs4.element import Tag

from surfer.err.exceptions import TableLayoutError
from surfer.modem.signal import Channel
from surfer.util.htmlutil import get_text

log = structlog.get_logger(__name__)

Converter = Callable[[str], Any]


##
# Converters
##
# Each one takes the trimmed cell text.
# Raising ValueError means "cosmetic garbage in this cell": the field keeps its default and the
#   rest of the row is still used.
##
def text(value: str) -> str:
    return value


def first_token(value: str) -> str:
    """'603000000 Hz' -> '603000000'"""
    tokens = value.split()
    return tokens[0] if tokens else ""


def number(value: str) -> float:
    """'6.3 dBmV' -> 6.3"""
    tokens = value.split()
    if not tokens:
        raise ValueError("empty cell")
    return float(tokens[0])


def scaled(factor: float) -> Converter:
    """Build a converter for numbers reported in multiples of a unit, e.g. Msym/sec"""

    def _convert(value: str) -> float:
        return number(value) * factor

    return _convert


def single_line(value: str) -> str:
    """Some cells hold one entry per line; join them with a space"""
    return value.replace("\n", " ")


@dataclass(frozen=True)
class Field:
    """Where a cell's value ends up. A `name` of None means read the cell but drop it."""

    name: str | None
    convert: Converter = text


# Marks the row/column that holds the channel id
CHANNEL = Field("channel")

# Cell we know about but don't keep (secondary channel id, lock status on downstream ... etc)
IGNORED = Field(None)


@dataclass(frozen=True)
class AttributeRowLayout:
    """Row-per-attribute table. `rows[0]` must be CHANNEL."""

    title: str
    rows: tuple[Field, ...]
    # Rows above the channel id row (table title ... etc)
    header_rows: int = 1


@dataclass(frozen=True)
class ChannelRowLayout:
    """Row-per-channel table. Exactly one of `columns` must be CHANNEL.

    Title and heading rows are recognized by what they hold, not by position (see is_heading_row).
    """

    title: str
    columns: tuple[Field, ...]


def _apply(fields: dict[str, Any], spec: Field, raw: str, **context) -> None:
    if spec.name is None:
        return
    try:
        fields[spec.name] = spec.convert(raw)
    except ValueError as ve:
        # Leave the default (zero) value in place; a bad cell is not worth losing the poll over
        log.debug("Skipping unparsable cell", field=spec.name, raw=raw, error=ve, **context)


def parse_attribute_rows(
    table: Tag, layout: AttributeRowLayout
) -> dict[Channel, dict[str, Any]]:
    """Walk a row-per-attribute table and return {channel: {field: value}}.

    Any row past the ones described by the layout is fatal; it means the page changed.
    """
    rows = table.select("tr")[layout.header_rows :]
    log.debug("Rows", title=layout.title, count=len(rows))
    if not rows:
        raise TableLayoutError(f"No channel id row in {layout.title} table")

    channels: list[Channel] = []
    parsed: dict[Channel, dict[str, Any]] = {}
    # First cell of each row is the attribute label
    for td in rows[0].select("td")[1:]:
        ch = Channel(get_text(td))
        if ch in parsed:
            raise TableLayoutError(f"Duplicate channel {ch!r} in {layout.title} table")
        channels.append(ch)
        parsed[ch] = {}

    for row_idx, tr in enumerate(rows[1:], start=1):
        if row_idx >= len(layout.rows):
            raise TableLayoutError(f"Unhandled {row_idx} row in {layout.title} table")
        spec = layout.rows[row_idx]
        cells = tr.select("td")[1:]
        if len(cells) > len(channels):
            raise TableLayoutError(
                f"Row {row_idx} in {layout.title} table has {len(cells)} values for {len(channels)} channels"
            )
        for ch, td in zip(channels, cells):
            _apply(parsed[ch], spec, get_text(td), title=layout.title, channel=ch, row_idx=row_idx)
    return parsed


def is_heading_row(tr: Tag) -> bool:
    """Title (`<th>`) and column heading (every cell a `<strong>` label) rows carry no channel data.

    The SB8200 leaves its heading cells outside of any `<tr>` (see the sb8200 parser) so the number
        of heading rows html.parser hands us isn't fixed; go by content instead of position.
    """
    if tr.th is not None:
        return True
    cells = tr.select("td")
    return bool(cells) and all(td.strong is not None for td in cells)


def parse_channel_rows(
    table: Tag, layout: ChannelRowLayout
) -> dict[Channel, dict[str, Any]]:
    """Walk a row-per-channel table and return {channel: {field: value}}."""
    rows = table.select("tr")
    log.debug("Rows", title=layout.title, count=len(rows))

    parsed: dict[Channel, dict[str, Any]] = {}
    for row_idx, tr in enumerate(rows):
        if is_heading_row(tr):
            log.debug("Skipping heading row", title=layout.title, row_idx=row_idx)
            continue
        cells = tr.select("td")
        if not cells:
            log.debug("Skipping row without cells", title=layout.title, row_idx=row_idx)
            continue
        ch = None
        fields: dict[str, Any] = {}
        for col_idx, td in enumerate(cells):
            value = get_text(td)
            if col_idx >= len(layout.columns):
                log.error(
                    "Unexpected column in table",
                    title=layout.title,
                    row_idx=row_idx,
                    col_idx=col_idx,
                    value=value,
                )
                continue
            spec = layout.columns[col_idx]
            if spec == CHANNEL:
                ch = Channel(value)
                continue
            _apply(fields, spec, value, title=layout.title, row_idx=row_idx, col_idx=col_idx)

        if ch is None:
            raise TableLayoutError(f"Row {row_idx} in {layout.title} table has no channel column")
        if ch in parsed:
            raise TableLayoutError(f"Duplicate channel {ch!r} in {layout.title} table")
        parsed[ch] = fields

    if not parsed:
        raise TableLayoutError(f"No channel rows in {layout.title} table")
    return parsed
