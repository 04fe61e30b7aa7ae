"""
End-to-end scenarios: client, default transport and services together.
"""

import io

import pytest
import requests
import responses

from packet_client import (
    ApiError,
    JSONTarget,
    RateSnapshot,
    RawSink,
    TooManyRequestsError,
    new_client,
)

pytestmark = pytest.mark.integration

API = "https://api.packet.net"


@pytest.fixture
def packet():
    client = new_client("consumer-123", "key-abc", timeout=10)
    yield client
    client.close()


class TestScenarios:

    def test_list_plans(self, packet, mock_responses):
        mock_responses.add(
            responses.GET,
            f"{API}/plans",
            json={"plans": [{"id": "p1", "name": "baremetal_0"}]},
            headers={
                "X-RateLimit-Limit": "5000",
                "X-RateLimit-Remaining": "4999",
                "X-RateLimit-Reset": "1700000000",
            },
        )

        plans = packet.plans.list()

        assert plans == [{"id": "p1", "name": "baremetal_0"}]
        assert packet.rate_limit.limit == 5000
        assert packet.rate_limit.remaining == 4999
        assert packet.rate_limit.reset.timestamp() == 1700000000

        sent = mock_responses.calls[0].request
        assert sent.headers["X-Auth-Token"] == "key-abc"
        assert sent.headers["X-Consumer-Token"] == "consumer-123"
        assert sent.headers["Connection"] == "close"

    def test_rate_limited(self, packet, mock_responses):
        mock_responses.add(
            responses.GET,
            f"{API}/devices/d1",
            json={"message": "Rate limit exceeded"},
            headers={"X-RateLimit-Limit": "5000", "X-RateLimit-Remaining": "0"},
            status=429,
        )

        with pytest.raises(TooManyRequestsError) as exc_info:
            packet.devices.get("d1")

        error = exc_info.value
        assert isinstance(error, ApiError)
        assert error.status_code == 429
        assert error.message == "Rate limit exceeded"
        assert str(error) == f"GET {API}/devices/d1: 429 Rate limit exceeded"
        assert error.response.rate.is_exhausted
        assert packet.rate_limit.is_exhausted

    def test_connection_refused(self, packet, mock_responses):
        mock_responses.add(
            responses.GET,
            f"{API}/plans",
            body=requests.exceptions.ConnectionError("Connection refused"),
        )
        target = JSONTarget()

        with pytest.raises(requests.exceptions.ConnectionError, match="Connection refused"):
            packet.do(packet.new_request("GET", "plans"), target)

        assert target.populated is False
        assert packet.rate_limit == RateSnapshot()

    def test_raw_download_then_json(self, packet, mock_responses):
        mock_responses.add(responses.GET, f"{API}/devices/d1/userdata", body=b"\x00\x01binary")
        mock_responses.add(responses.GET, f"{API}/user", json={"id": "me"})
        sink = io.BytesIO()

        packet.request("GET", "devices/d1/userdata", destination=RawSink(sink))
        me = packet.users.current()

        assert sink.getvalue() == b"\x00\x01binary"
        assert me == {"id": "me"}
