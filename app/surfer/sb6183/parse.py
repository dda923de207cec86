"""
Pulls the bonded channel tables out of the SB6183's status page (served from `/`).
"""

import structlog

from surfer.modem.document import build_signal, parse_document, select_tables
from surfer.modem.layout import (
    CHANNEL,
    IGNORED,
    ChannelRowLayout,
    Field,
    number,
    parse_channel_rows,
    scaled,
)
from surfer.modem.signal import Signal

log = structlog.get_logger(__name__)

FINGERPRINT = b'<span id="thisModelNumberIs">SB6183</span>'

# Startup Procedure, Downstream Bonded Channels, Upstream Bonded Channels
SIMPLE_TABLE_SELECTOR = ".simpleTable"
SIMPLE_TABLE_COUNT = 3

# Both tables open with a title row and a heading row; parse_channel_rows skips them.
# DS: ['1', 'Locked', 'QAM256', '17', '555000000 Hz', '6.3 dBmV', '38.4 dB', '0', '0']
DOWNSTREAM = ChannelRowLayout(
    title="Downstream Bonded Channels",
    columns=(
        CHANNEL,  # Channel
        IGNORED,  # Lock Status
        Field("modulation"),
        IGNORED,  # Channel ID
        Field("frequency"),
        Field("power_level", number),
        Field("snr", number),
        Field("correctable", number),  # Corrected
        Field("uncorrectable", number),  # Uncorrectables
    ),
)

# US: ['1', 'Locked', 'ATDMA', '3', '5120 Ksym/sec', '36500000 Hz', '36.0 dBmV']
UPSTREAM = ChannelRowLayout(
    title="Upstream Bonded Channels",
    columns=(
        CHANNEL,  # Channel
        Field("lock_status"),
        Field("modulation"),  # US Channel Type
        IGNORED,  # Channel ID
        Field("symbol_rate", scaled(1000)),  # Ksym/sec
        Field("frequency"),
        Field("power_level", number),
    ),
)


def parse_status(raw: bytes) -> Signal:
    """Parse the status page into a Signal"""
    soup = parse_document(raw)
    _, downstream_table, upstream_table = select_tables(
        soup, SIMPLE_TABLE_SELECTOR, SIMPLE_TABLE_COUNT
    )
    downstream = parse_channel_rows(downstream_table, DOWNSTREAM)
    upstream = parse_channel_rows(upstream_table, UPSTREAM)
    log.debug("Parsed SB6183 status", downstream=len(downstream), upstream=len(upstream))
    return build_signal(downstream, upstream)
