"""Model independent pieces: the Signal records, the Modem contract and model detection."""

from surfer.modem.base import Modem
from surfer.modem.registry import ModemRegistry
from surfer.modem.signal import Channel, Downstream, Signal, Upstream

__all__ = ["Channel", "Downstream", "Modem", "ModemRegistry", "Signal", "Upstream"]
