from __future__ import annotations


class ConductCheckError(RuntimeError):
    """Base class for every failure raised while checking a message."""


class ConfigurationError(ConductCheckError, ValueError):
    """The checker was constructed with missing or invalid settings."""


class UnsupportedFormatError(ConductCheckError, NotImplementedError):
    """No code of conduct is available in a format the checker can use."""


class TransportError(ConductCheckError):
    """The endpoint could not be reached or answered with an unexpected status."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ProtocolError(ConductCheckError):
    """The endpoint answered, but the reply does not have the expected shape."""


class TooManyRedirectsError(ProtocolError):
    def __init__(self, max_redirects: int) -> None:
        super().__init__(f"Exceeded the maximum of {max_redirects} redirect(s) while calling the endpoint")
        self.max_redirects = max_redirects
