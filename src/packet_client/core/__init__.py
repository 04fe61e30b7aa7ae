"""Core Packet API client modules."""

from .config import (
    ClientConfig,
    TimeoutConfig,
    DEFAULT_BASE_URL,
    LIBRARY_VERSION,
    USER_AGENT,
)
from .exceptions import (
    PacketClientException,
    ConfigurationError,
    RequestBuildError,
    ApiError,
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    UnprocessableEntityError,
    TooManyRequestsError,
    ServerError,
    DecodeError,
)
from .rate_limit import RateSnapshot, parse_rate
from .response import Response
from .destinations import Destination, JSONTarget, RawSink
from .options import ListOptions
from .transport import Transport, SessionTransport
from .request_builder import build_request
from .error_handler import ErrorHandler, check_response
from .dispatcher import dispatch
from .client import Client, new_client

__all__ = [
    # Config
    "ClientConfig",
    "TimeoutConfig",
    "DEFAULT_BASE_URL",
    "LIBRARY_VERSION",
    "USER_AGENT",
    # Exceptions
    "PacketClientException",
    "ConfigurationError",
    "RequestBuildError",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "UnprocessableEntityError",
    "TooManyRequestsError",
    "ServerError",
    "DecodeError",
    # Data
    "RateSnapshot",
    "parse_rate",
    "Response",
    "Destination",
    "JSONTarget",
    "RawSink",
    "ListOptions",
    # Transport / dispatch
    "Transport",
    "SessionTransport",
    "build_request",
    "ErrorHandler",
    "check_response",
    "dispatch",
    # Client
    "Client",
    "new_client",
]
