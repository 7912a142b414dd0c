"""Upstream adapter error types.

Every adapter failure derives from UpstreamError so handlers can map the whole
family to a single HTTP 500 and the city bundle can demote it to an
`<field>_error` string.
"""


class UpstreamError(Exception):
    """Base class for failures talking to a third-party API."""

    pass


class UpstreamTransportError(UpstreamError):
    """Network or connection failure reaching the upstream."""

    pass


class UpstreamTimeoutError(UpstreamTransportError):
    """Upstream did not answer within the configured deadline."""

    pass


class UpstreamStatusError(UpstreamError):
    """Upstream answered with a non-success status."""

    def __init__(self, source: str, status_code: int, body: str) -> None:
        self.source = source
        self.status_code = status_code
        self.body = body
        super().__init__(f"{source} API error: {status_code} - {body}")


class NotFoundError(UpstreamError):
    """Geocoding yielded zero matches."""

    pass


class DecodeError(UpstreamError):
    """Upstream body did not match the expected shape."""

    pass


class MissingCredentialError(UpstreamError):
    """A provider credential is not configured."""

    pass


class GeocodingError(UpstreamError):
    """Coordinate resolution failed inside a dependent adapter."""

    def __init__(self, cause: UpstreamError) -> None:
        self.cause = cause
        super().__init__(f"geocoding failed: {cause}")
