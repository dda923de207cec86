"""Vendor-neutral records for one poll of a modem's signal page.

Every status call builds a brand new Signal; nothing here is ever updated in place.
"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Mapping, NewType

# Channel label exactly as the modem UI shows it. Only unique within one direction.
Channel = NewType("Channel", str)


@dataclass(frozen=True)
class Downstream:
    # Hz, as reported; may still carry the unit
    frequency: str = ""
    modulation: str = ""
    # dBmV
    power_level: float = 0.0
    # dB
    snr: float = 0.0
    correctable: float = 0.0
    uncorrectable: float = 0.0
    # Not every model reports this one
    unerrored: float = 0.0


@dataclass(frozen=True)
class Upstream:
    # Hz, as reported; may still carry the unit
    frequency: str = ""
    # Symbols / second, already scaled from whatever unit the model uses
    symbol_rate: float = 0.0
    # dBmV
    power_level: float = 0.0
    modulation: str = ""
    lock_status: str = ""


@dataclass(frozen=True)
class Signal:
    downstream: Mapping[Channel, Downstream] = field(default_factory=dict)
    upstream: Mapping[Channel, Upstream] = field(default_factory=dict)

    def __post_init__(self):
        # Copy then hide behind a read-only view so the caller's dicts can't leak mutations in
        object.__setattr__(self, "downstream", MappingProxyType(dict(self.downstream)))
        object.__setattr__(self, "upstream", MappingProxyType(dict(self.upstream)))

    def as_dict(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Plain nested dicts; handy for json.dumps() and log output."""
        return {
            "downstream": {ch: _record_as_dict(d) for ch, d in self.downstream.items()},
            "upstream": {ch: _record_as_dict(u) for ch, u in self.upstream.items()},
        }


def _record_as_dict(record: Downstream | Upstream) -> dict[str, Any]:
    return {f.name: getattr(record, f.name) for f in fields(record)}
