"""Response wrapper: the transport response plus its rate-limit snapshot."""

from typing import Any

import requests

from .rate_limit import RateSnapshot, parse_rate


class Response:
    """
    Wraps a requests.Response for a single call.

    Unknown attributes are delegated to the underlying response, so
    ``resp.status_code``, ``resp.headers`` and friends read as usual.
    The body has already been consumed and closed by the time callers
    receive the wrapper.

    Attributes:
        http_response: Underlying requests.Response
        rate: Rate-limit snapshot parsed from this response's headers
    """

    def __init__(self, http_response: requests.Response):
        self.http_response = http_response
        self.rate = RateSnapshot()

    def populate_rate(self) -> RateSnapshot:
        """Parse the rate-limit headers into ``self.rate``."""
        self.rate = parse_rate(self.http_response.headers)
        return self.rate

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def method(self) -> str:
        request = self.http_response.request
        return request.method if request is not None and request.method else ""

    @property
    def request_url(self) -> str:
        """URL of the originating request (falls back to the response URL)."""
        request = self.http_response.request
        if request is not None and request.url:
            return request.url
        return self.http_response.url or ""

    def __getattr__(self, name: str) -> Any:
        # only called for attributes not found on the wrapper itself
        if name == "http_response":
            raise AttributeError(name)
        return getattr(self.http_response, name)

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {self.method} {self.request_url}>"
