"""Simple wrappers for the failure states a status poll can end in.

Fingerprint mismatches have no exception here: detection reports an unrecognized page as None.
"""


class ModemNotOkError(Exception):
    """Exception for non-200/OK responses from modem."""

    def __init__(self, message, status_code=None, payload=None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class SignalParseError(Exception):
    """Base for anything that stops a status page from becoming a Signal."""

    def __init__(self, message, payload=None):
        super().__init__(message)
        self.payload = payload


class DocumentParseError(SignalParseError):
    """The markup could not be turned into a tree at all."""


class TableLayoutError(SignalParseError):
    """Tables/rows don't match the layout we know for this model.

    Almost always means a firmware update changed the page and the layout tables need updating.
    """
