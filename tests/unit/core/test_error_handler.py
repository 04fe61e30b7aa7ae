"""
Tests for response classification.
"""

import pytest

from packet_client.core.error_handler import ErrorHandler, check_response
from packet_client.core.exceptions import (
    ApiError,
    NotFoundError,
    ServerError,
    UnprocessableEntityError,
)
from packet_client.core.request_builder import build_request
from packet_client.core.response import Response


@pytest.fixture
def wrap(config, http_response):
    def factory(status, body=b"", method="GET", path="plans"):
        request = build_request(config, method, path)
        return Response(http_response(status, body, {}, request))
    return factory


class TestIsSuccess:

    @pytest.mark.parametrize("status", [200, 201, 202, 204, 299])
    def test_success_range(self, status):
        assert ErrorHandler.is_success(status) is True

    @pytest.mark.parametrize("status", [100, 199, 300, 304, 400, 404, 500])
    def test_outside_range(self, status):
        assert ErrorHandler.is_success(status) is False


class TestExtractMessage:

    def test_message_field(self):
        assert ErrorHandler.extract_message(b'{"message": "invalid hostname"}') == "invalid hostname"

    def test_message_key_case_insensitive(self):
        assert ErrorHandler.extract_message(b'{"Message": "nope"}') == "nope"

    @pytest.mark.parametrize("body", [
        b"",
        b"<html>Bad Gateway</html>",
        b'["message"]',
        b'{"errors": ["bad"]}',
        b'{"message": 42}',
    ])
    def test_unusable_bodies_give_empty_message(self, body):
        assert ErrorHandler.extract_message(body) == ""


class TestCheckResponse:

    @pytest.mark.parametrize("status", [200, 201, 204])
    def test_success_passes(self, wrap, status):
        check_response(wrap(status, b"not json at all"))

    def test_error_with_message(self, wrap):
        with pytest.raises(UnprocessableEntityError) as exc_info:
            check_response(wrap(422, b'{"message":"invalid hostname"}', "POST", "devices"))

        error = exc_info.value
        assert error.status_code == 422
        assert error.message == "invalid hostname"
        assert str(error) == "POST https://api.packet.net/devices: 422 invalid hostname"

    def test_error_without_body(self, wrap):
        with pytest.raises(NotFoundError) as exc_info:
            check_response(wrap(404))

        assert exc_info.value.message == ""
        assert str(exc_info.value) == "GET https://api.packet.net/plans: 404 "

    def test_error_with_non_json_body(self, wrap):
        with pytest.raises(ServerError) as exc_info:
            check_response(wrap(502, b"<html>Bad Gateway</html>"))

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == ""

    def test_redirect_status_is_an_error(self, wrap):
        with pytest.raises(ApiError) as exc_info:
            check_response(wrap(304))

        assert exc_info.value.status_code == 304
