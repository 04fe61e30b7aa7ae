"""
Tests for the exception hierarchy.
"""

import pytest

from packet_client.core.exceptions import (
    ApiError,
    BadRequestError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    PacketClientException,
    RequestBuildError,
    ServerError,
    TooManyRequestsError,
    UnauthorizedError,
    UnprocessableEntityError,
    error_class_for_status,
)
from packet_client.core.response import Response


@pytest.fixture
def make_wrapper(config, http_response):
    """Build a Response wrapper for a given status."""
    from packet_client.core.request_builder import build_request

    def factory(status, method="GET", path="plans"):
        request = build_request(config, method, path)
        return Response(http_response(status, b"", {}, request))

    return factory


class TestApiError:
    """Test ApiError formatting and invariants."""

    def test_str_contains_method_url_status_message(self, make_wrapper):
        error = ApiError(make_wrapper(404), "Not found")
        assert str(error) == "GET https://api.packet.net/plans: 404 Not found"

    def test_str_with_empty_message_keeps_fixed_order(self, make_wrapper):
        error = ApiError(make_wrapper(500, "DELETE", "devices/abc"))
        assert str(error) == "DELETE https://api.packet.net/devices/abc: 500 "

    def test_attributes(self, make_wrapper):
        wrapper = make_wrapper(422, "POST", "devices")
        error = ApiError(wrapper, "invalid hostname")

        assert error.status_code == 422
        assert error.method == "POST"
        assert error.url == "https://api.packet.net/devices"
        assert error.message == "invalid hostname"
        assert error.response is wrapper

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_cannot_be_built_for_success_status(self, make_wrapper, status):
        with pytest.raises(ValueError):
            ApiError(make_wrapper(status))

    def test_inheritance(self, make_wrapper):
        error = NotFoundError(make_wrapper(404))
        assert isinstance(error, ApiError)
        assert isinstance(error, PacketClientException)


class TestErrorClassForStatus:
    """Test status-code to exception class mapping."""

    @pytest.mark.parametrize("status, expected", [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (422, UnprocessableEntityError),
        (429, TooManyRequestsError),
        (500, ServerError),
        (503, ServerError),
        (409, ApiError),
        (302, ApiError),
        (100, ApiError),
    ])
    def test_mapping(self, status, expected):
        assert error_class_for_status(status) is expected


class TestRequestBuildError:
    """Test RequestBuildError message."""

    def test_message_includes_method_and_path(self):
        error = RequestBuildError("Cannot encode request body", "POST", "devices")
        assert str(error) == "Cannot encode request body (POST devices)"

    def test_message_without_context(self):
        assert str(RequestBuildError("boom")) == "boom"


class TestDecodeError:
    """Test DecodeError."""

    def test_carries_response_and_cause(self, make_wrapper):
        wrapper = make_wrapper(200)
        cause = ValueError("Expecting value")
        error = DecodeError(wrapper, cause)

        assert error.response is wrapper
        assert error.cause is cause
        assert "GET https://api.packet.net/plans" in str(error)
        assert "Expecting value" in str(error)
        assert not isinstance(error, ApiError)
