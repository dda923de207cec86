"""Motorola/ARRIS SB6121."""

from surfer.sb6121.modem import SB6121

__all__ = ["SB6121"]
