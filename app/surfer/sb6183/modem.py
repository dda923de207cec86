from surfer.modem.base import Modem
from surfer.sb6183.parse import FINGERPRINT, parse_status


class SB6183(Modem):
    """ARRIS SB6183 (DOCSIS 3.0, 16x4)"""

    name = "SB6183"
    signal_path = "/"
    fingerprint = FINGERPRINT
    parse = staticmethod(parse_status)
