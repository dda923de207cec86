"""
Pulls the bonded channel tables out of the SB8200's /cmconnectionstatus.html page.
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
)
from surfer.modem.signal import Signal

log = structlog.get_logger(__name__)

FINGERPRINT = b'<span id="thisModelNumberIs">SB8200</span>'

# Of course the modem returns INVALID html.
# Here's a snippet of the HTML that we're trying to parse:
#                   <tr>
#                     <th colspan=8><strong>Downstream Bonded Channels</strong></th>
#                   </tr>
#                   <td><strong>Channel ID</strong></td>
#                   <td><strong>Lock Status</strong></td>
#                   ...
#                   <td><strong>Uncorrectables</strong></td>
#                   </tr>
#
# Notice that the opening `<tr>` is closed ... TWICE?
# html.parser leaves those heading cells hanging off the <table> instead of in a row of their
#     own, so the heading rows are skipped by content (see is_heading_row) and the columns are
#     indexed by position.
# I'm not expecting the headings to change often, so this should be fine for now.
##
# The page has three simpleTable tables: Startup Procedure, Downstream and Upstream.
SIMPLE_TABLE_SELECTOR = ".simpleTable"
SIMPLE_TABLE_COUNT = 3

# DS: ['4', 'Locked', 'QAM256', '363000000 Hz', '6.2 dBmV', '40.5 dB', '0', '0']
DOWNSTREAM = ChannelRowLayout(
    title="Downstream Bonded Channels",
    columns=(
        CHANNEL,  # Channel ID
        IGNORED,  # Lock Status
        Field("modulation"),
        Field("frequency"),
        Field("power_level", number),
        Field("snr", number),  # SNR/MER
        Field("correctable", number),  # Corrected
        Field("uncorrectable", number),  # Uncorrectables
    ),
)

# US: ['1', '1', 'Locked', 'SC-QAM Upstream', '10400000 Hz', '3200000 Hz', '43.0 dBmV']
# The first column is "Channel" which appears to just be a numerical index the same way a
#   spreadsheet would have a number for each row. It's still what the UI calls the channel.
# No symbol rate on this model; width is the closest thing and it isn't the same quantity.
UPSTREAM = ChannelRowLayout(
    title="Upstream Bonded Channels",
    columns=(
        CHANNEL,  # Channel
        IGNORED,  # Channel ID
        Field("lock_status"),
        Field("modulation"),  # US Channel Type
        Field("frequency"),
        IGNORED,  # Width
        Field("power_level", number),
    ),
)


def parse_status(raw: bytes) -> Signal:
    """Parse the connection status page into a Signal"""
    soup = parse_document(raw)
    _, downstream_table, upstream_table = select_tables(
        soup, SIMPLE_TABLE_SELECTOR, SIMPLE_TABLE_COUNT
    )
    downstream = parse_channel_rows(downstream_table, DOWNSTREAM)
    upstream = parse_channel_rows(upstream_table, UPSTREAM)
    log.debug("Parsed SB8200 status", downstream=len(downstream), upstream=len(upstream))
    return build_signal(downstream, upstream)
