"""ARRIS SB8200.

Same row-per-channel layout as the SB6183 with the columns shuffled and no symbol rate.
"""

from surfer.sb8200.modem import SB8200

__all__ = ["SB8200"]
