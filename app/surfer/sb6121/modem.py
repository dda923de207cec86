from surfer.modem.base import Modem
from surfer.sb6121.parse import FINGERPRINT, parse_status


class SB6121(Modem):
    """Motorola/ARRIS SB6121 (DOCSIS 3.0, 4x4)"""

    name = "SB6121"
    signal_path = "/cmSignalData.htm"
    fingerprint = FINGERPRINT
    parse = staticmethod(parse_status)
