"""
Pulls signal data out of the SB6121's /cmSignalData.htm page.

This is the old FrontPage generated page: every table is sideways. The first data row lists the
    channel ids and each row after that is a single attribute for every channel.
"""

import structlog

from surfer.err.exceptions import TableLayoutError
from surfer.modem.document import build_signal, parse_document, select_tables
from surfer.modem.layout import (
    CHANNEL,
    IGNORED,
    AttributeRowLayout,
    Field,
    first_token,
    number,
    parse_attribute_rows,
    scaled,
    single_line,
)
from surfer.modem.signal import Signal

log = structlog.get_logger(__name__)

FINGERPRINT = b'<META content="Microsoft FrontPage 4.0" name=GENERATOR>'

# All top-level tables are immediate descendants of <center>. The downstream table has a
#   nested table (the "Power Level" explanation) inside a <td> which this selector excludes.
TABLE_SELECTOR = "center > table"
TABLE_COUNT = 3

DOWNSTREAM = AttributeRowLayout(
    title="Downstream",
    rows=(
        CHANNEL,
        Field("frequency", first_token),  # '603000000 Hz'
        Field("snr", number),  # Signal to Noise Ratio, '37 dB'
        Field("modulation"),
        Field("power_level", number),  # '10 dBmV'
    ),
)

UPSTREAM = AttributeRowLayout(
    title="Upstream",
    rows=(
        CHANNEL,
        Field("frequency", first_token),
        IGNORED,  # Ranging Service ID
        Field("symbol_rate", scaled(1_000_000)),  # '5.120 Msym/sec'
        Field("power_level", number),
        # One modulation profile per line: '[3] QPSK\n[3] 64QAM'
        Field("modulation", single_line),
        Field("lock_status"),  # Ranging Status
    ),
)

CODEWORDS = AttributeRowLayout(
    title="Signal Stats (Codewords)",
    rows=(
        CHANNEL,
        Field("unerrored", number),  # Total Unerrored Codewords
        Field("correctable", number),  # Total Correctable Codewords
        Field("uncorrectable", number),  # Total Uncorrectable Codewords
    ),
)


def parse_status(raw: bytes) -> Signal:
    """Parse the signal data page into a Signal"""
    soup = parse_document(raw)
    downstream_table, upstream_table, codewords_table = select_tables(
        soup, TABLE_SELECTOR, TABLE_COUNT
    )

    # Nested tables would add their rows to the parent's row count; get rid of them.
    for table in (downstream_table, upstream_table, codewords_table):
        for nested in table.select("table"):
            nested.extract()

    downstream = parse_attribute_rows(downstream_table, DOWNSTREAM)
    upstream = parse_attribute_rows(upstream_table, UPSTREAM)

    # Codeword counters live in their own table, keyed by the same downstream channel ids
    for ch, counters in parse_attribute_rows(codewords_table, CODEWORDS).items():
        if ch not in downstream:
            raise TableLayoutError(f"Codeword stats for unknown downstream channel {ch!r}")
        downstream[ch].update(counters)

    log.debug("Parsed SB6121 status", downstream=len(downstream), upstream=len(upstream))
    return build_signal(downstream, upstream)
