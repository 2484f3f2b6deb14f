"""Exception classes for the hotel search service."""


class LuxiaError(Exception):
    """Base exception for the hotel search service."""

    status_code = 500

    def __init__(self, message: str, raw: str | None = None):
        super().__init__(message)
        self.message = message
        self.raw = raw


class ConfigurationError(LuxiaError):
    """A required credential or setting is missing."""


class CompletionError(LuxiaError):
    """The completion service call failed at the transport or HTTP level."""

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class RecoveryError(LuxiaError):
    """The completion text could not be turned into a list of hotels."""


class JsonArrayNotFoundError(RecoveryError):
    """No [...] substring in the completion text."""


class JsonArrayParseError(RecoveryError):
    """A [...] substring was found but is not valid JSON."""


class HotelShapeError(RecoveryError):
    """A parsed array entry is not a JSON object."""
