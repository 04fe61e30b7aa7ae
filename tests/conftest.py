"""
Pytest configuration and fixtures for packet-client-core tests.
"""

import io
from typing import List, Optional

import pytest
import requests
import responses as responses_lib
from requests.structures import CaseInsensitiveDict
from urllib3.exceptions import ProtocolError

from packet_client.core.client import Client
from packet_client.core.config import ClientConfig
from packet_client.core.logging.config import LoggingConfig
from packet_client.core.transport import Transport


class BrokenBody(io.BytesIO):
    """Raw body whose stream breaks mid-read, like a dropped chunked response."""

    def stream(self, chunk_size=None, decode_content=True):
        raise ProtocolError("Connection broken: IncompleteRead")
        yield b""


class TrackingResponse(requests.Response):
    """requests.Response that counts close() calls."""

    def __init__(self):
        super().__init__()
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()


def make_http_response(
    status: int = 200,
    body=b"",
    headers: Optional[dict] = None,
    request: Optional[requests.PreparedRequest] = None,
) -> TrackingResponse:
    """
    Build an unread, streamable response like the one a transport returns.

    ``body`` is bytes or a ready raw object (e.g. BrokenBody).
    """
    response = TrackingResponse()
    response.status_code = status
    response.raw = io.BytesIO(body) if isinstance(body, bytes) else body
    response.headers = CaseInsensitiveDict(headers or {})
    response.request = request
    response.url = request.url if request is not None else ""
    return response


class FakeTransport(Transport):
    """
    Transport returning canned responses (or raising canned errors) in order.

    Records every request it was asked to send.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.sent: List[requests.PreparedRequest] = []
        self.responses: List[TrackingResponse] = []
        self.closed = False

    def send(self, request):
        self.sent.append(request)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        status, body, headers = outcome
        response = make_http_response(status, body, headers, request)
        self.responses.append(response)
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return "https://api.packet.net/"


@pytest.fixture
def config(base_url):
    """Client configuration with test credentials."""
    return ClientConfig(consumer_token="consumer-123", api_key="key-abc", base_url=base_url)


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def client(config):
    """Client over the default SessionTransport (use with mock_responses)."""
    client = Client(config=config)
    yield client
    client.close()


@pytest.fixture
def fake_transport_client(config):
    """Factory: Client wired to a FakeTransport with the given outcomes."""
    created = []

    def factory(*outcomes):
        transport = FakeTransport(*outcomes)
        client = Client(config=config, transport=transport)
        created.append(client)
        return client, transport

    yield factory

    for client in created:
        client.close()


@pytest.fixture
def logging_config_with_file(tmp_path):
    """LoggingConfig writing JSON lines to a temporary file."""
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        enable_file=True,
        file_path=str(tmp_path / "packet.log")
    )


@pytest.fixture
def fake_transport():
    """FakeTransport class, called with outcomes: (status, body, headers) or an exception."""
    return FakeTransport


@pytest.fixture
def broken_body():
    """BrokenBody class: a raw body that fails when read."""
    return BrokenBody


@pytest.fixture
def http_response():
    """make_http_response helper."""
    return make_http_response
