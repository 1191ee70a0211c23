"""
Errors raised while fetching and decoding a Mesos master snapshot.
"""


class ExporterError(Exception):
    """Base class for all exporter errors."""


class TransportError(ExporterError):
    """The master could not be reached (connection failure, timeout, HTTP error status)."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Error fetching {url}: {cause}")


class DecodeError(ExporterError):
    """The response body is not a valid state document."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Error decoding response body from {url}: {cause}")


class RangeDecodeError(DecodeError, ValueError):
    """A port range encoding could not be parsed.

    Also a ValueError so pydantic validators surface it as a validation error.
    """

    def __init__(self, message: str):
        self.url = ""
        self.cause = None
        Exception.__init__(self, message)
