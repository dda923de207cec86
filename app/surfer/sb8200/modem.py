from surfer.modem.base import Modem
from surfer.sb8200.parse import FINGERPRINT, parse_status


class SB8200(Modem):
    """ARRIS SB8200 (DOCSIS 3.1)"""

    name = "SB8200"
    signal_path = "/cmconnectionstatus.html"
    fingerprint = FINGERPRINT
    parse = staticmethod(parse_status)
