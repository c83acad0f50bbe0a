"""Errors raised by the search client."""


class SearchClientError(RuntimeError):
    """Base class for every failed search call."""


class UpstreamStatusError(SearchClientError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"{status_code}: {reason}")


class TransportError(SearchClientError):
    """The request did not complete or its body was not valid JSON."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
