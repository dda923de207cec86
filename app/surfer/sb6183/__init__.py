"""ARRIS SB6183."""

from surfer.sb6183.modem import SB6183

__all__ = ["SB6183"]
