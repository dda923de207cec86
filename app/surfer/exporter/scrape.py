"""
Implementation of the poll and metric update functions
"""

from collections import Counter as Tally

import structlog
from aiohttp import ClientSession

from surfer.err.exceptions import SignalParseError
from surfer.exporter import metrics
from surfer.modem.base import Modem
from surfer.modem.signal import Signal
from surfer.util.const import FETCH_TIMEOUT_SECONDS

log = structlog.get_logger(__name__)


async def do_modem_scrape(
    modem: Modem,
    cs: ClientSession | None,
    timeout: float = FETCH_TIMEOUT_SECONDS,
) -> Signal:
    """Poll the modem once and record how it went.

    Errors are counted and re-raised; the poll loop decides what to do about them.
    """
    with metrics.s_meta_scrape_time.time():
        try:
            signal = await modem.status(cs, timeout=timeout)
        except SignalParseError:
            metrics.c_meta_scrape_result.labels("parse_error").inc()
            raise
        except Exception:
            metrics.c_meta_scrape_result.labels("fetch_error").inc()
            raise
    metrics.c_meta_scrape_result.labels("ok").inc()
    return signal


def update_modem_metrics(modem: Modem) -> None:
    metrics.i_modem_info.info({"model": modem.name})


def update_signal_metrics(signal: Signal) -> None:
    """Replace whatever the gauges held with the values from `signal`.

    Channels come and go (re-ranging, OFDM channel showing up ...) so everything is cleared first;
        otherwise a channel that disappeared would keep reporting its last value forever.
    """
    for metric in metrics.SIGNAL_METRICS:
        metric.clear()

    log.info("Updating downstream channel metrics...", count=len(signal.downstream))
    for ch, ds in signal.downstream.items():
        labels = {"channel_id": ch, "modulation": ds.modulation}
        _set_frequency(metrics.g_downstream_frq_hz, labels, ds.frequency)
        metrics.g_downstream_power_dbmv.labels(**labels).set(ds.power_level)
        metrics.g_downstream_snr_db.labels(**labels).set(ds.snr)
        metrics.g_downstream_correctable.labels(**labels).set(ds.correctable)
        metrics.g_downstream_uncorrectable.labels(**labels).set(ds.uncorrectable)
        metrics.g_downstream_unerrored.labels(**labels).set(ds.unerrored)

    for modulation, count in Tally(ds.modulation for ds in signal.downstream.values()).items():
        metrics.g_downstream_modulation_count.labels(modulation).set(count)

    log.info("Updating upstream channel metrics...", count=len(signal.upstream))
    for ch, us in signal.upstream.items():
        labels = {"channel_id": ch, "modulation": us.modulation}
        _set_frequency(metrics.g_upstream_frq_hz, labels, us.frequency)
        metrics.g_upstream_symbol_rate.labels(**labels).set(us.symbol_rate)
        metrics.g_upstream_power_dbmv.labels(**labels).set(us.power_level)

    for status, count in Tally(us.lock_status for us in signal.upstream.values()).items():
        metrics.g_upstream_lock_status_count.labels(status).set(count)
    for modulation, count in Tally(us.modulation for us in signal.upstream.values()).items():
        metrics.g_upstream_modulation_count.labels(modulation).set(count)


def _set_frequency(gauge, labels: dict[str, str], frequency: str) -> None:
    # Frequencies are kept as reported, e.g. '363000000 Hz' or just '363000000'
    tokens = frequency.split()
    try:
        gauge.labels(**labels).set(float(tokens[0]))
    except (IndexError, ValueError) as e:
        log.error(
            "Failure to convert frequency into a number.",
            frequency=frequency,
            error=e,
            **labels,
        )
