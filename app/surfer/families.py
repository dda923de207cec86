"""
The models this build knows about, in the order detection tries them.

Order is explicit here rather than a side effect of which module happened to be imported first.
"""

from surfer.modem.registry import ModemRegistry
from surfer.sb6121 import SB6121
from surfer.sb6183 import SB6183
from surfer.sb8200 import SB8200

SUPPORTED_MODEMS = (SB6121, SB6183, SB8200)


def default_registry() -> ModemRegistry:
    registry = ModemRegistry()
    for family in SUPPORTED_MODEMS:
        registry.register(family)
    return registry
