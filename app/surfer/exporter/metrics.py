"""All the boiler plate / init code for defining metrics.

Every metric below is derived from one Signal. Per-channel values are gauges labelled with the
    channel id and the channel's modulation. Modulation and lock status are also summed up into
    "count of channels in this state" gauges.
"""

from prometheus_client import Counter, Gauge, Info, Summary, disable_created_metrics

# By default, client will automatically create a "_created" meta metric for
#   each metric defined below.
# Having the unix epoch time of when the metric was created isn't that useful for us
#   so we'll disable it.
disable_created_metrics()


METRICS_NS = "surfer"
META_NS = "surfer_meta"

##
# Meta Metrics
##
# summary comes with both a count and a sum so we don't need to count the number of scrapes ourselves
s_meta_scrape_time = Summary(
    f"{META_NS}_request_duration_seconds",
    "Time spent fetching and parsing the modem status page",
)

# Polls either produce a full Signal or nothing; count which
c_meta_scrape_result = Counter(
    f"{META_NS}_scrape_result",
    "Count of successful vs failed status polls",
    # ok, fetch_error, parse_error
    labelnames=["result"],
)

##
# General hardware info
##
i_modem_info = Info(
    f"{METRICS_NS}_modem",
    "Detected modem model",
)

##
# Downstream
##
g_downstream_frq_hz = Gauge(
    f"{METRICS_NS}_downstream_frequency_hz",
    "Frequency of the downstream channel.",
    labelnames=["channel_id", "modulation"],
)

g_downstream_power_dbmv = Gauge(
    f"{METRICS_NS}_downstream_power_level_dbmv",
    "Downstream power level reading in dBmV.",
    labelnames=["channel_id", "modulation"],
)

g_downstream_snr_db = Gauge(
    f"{METRICS_NS}_downstream_snr_db",
    "Downstream signal-to-noise ratio in dB.",
    labelnames=["channel_id", "modulation"],
)

# The modem reports running totals; they reset when the modem reboots so they're not a Counter
g_downstream_correctable = Gauge(
    f"{METRICS_NS}_downstream_correctable_codewords",
    "Total correctable codewords on the channel.",
    labelnames=["channel_id", "modulation"],
)

g_downstream_uncorrectable = Gauge(
    f"{METRICS_NS}_downstream_uncorrectable_codewords",
    "Total uncorrectable codewords on the channel.",
    labelnames=["channel_id", "modulation"],
)

g_downstream_unerrored = Gauge(
    f"{METRICS_NS}_downstream_unerrored_codewords",
    "Total unerrored codewords on the channel. Only reported by some models.",
    labelnames=["channel_id", "modulation"],
)

g_downstream_modulation_count = Gauge(
    f"{METRICS_NS}_downstream_modulation_count",
    "Count of downstream channels per modulation.",
    labelnames=["modulation"],
)

##
# Upstream
##
g_upstream_frq_hz = Gauge(
    f"{METRICS_NS}_upstream_frequency_hz",
    "Frequency of the upstream channel.",
    labelnames=["channel_id", "modulation"],
)

g_upstream_symbol_rate = Gauge(
    f"{METRICS_NS}_upstream_symbol_rate",
    "Upstream symbol rate in sym/sec.",
    labelnames=["channel_id", "modulation"],
)

g_upstream_power_dbmv = Gauge(
    f"{METRICS_NS}_upstream_power_level_dbmv",
    "Upstream transmit power level in dBmV.",
    labelnames=["channel_id", "modulation"],
)

g_upstream_lock_status_count = Gauge(
    f"{METRICS_NS}_upstream_lock_status_count",
    "Count of upstream channels per lock/ranging status.",
    labelnames=["lock_status"],
)

g_upstream_modulation_count = Gauge(
    f"{METRICS_NS}_upstream_modulation_count",
    "Count of upstream channels per modulation / channel type.",
    labelnames=["modulation"],
)

# Everything that gets wiped and rebuilt from each fresh Signal
SIGNAL_METRICS = (
    g_downstream_frq_hz,
    g_downstream_power_dbmv,
    g_downstream_snr_db,
    g_downstream_correctable,
    g_downstream_uncorrectable,
    g_downstream_unerrored,
    g_downstream_modulation_count,
    g_upstream_frq_hz,
    g_upstream_symbol_rate,
    g_upstream_power_dbmv,
    g_upstream_lock_status_count,
    g_upstream_modulation_count,
)
