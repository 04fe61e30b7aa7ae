"""Packet API client core - authenticated JSON requests, rate-limit tracking, structured errors."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .core.client import Client, new_client
from .core.config import ClientConfig, TimeoutConfig, LIBRARY_VERSION, USER_AGENT
from .core.destinations import JSONTarget, RawSink
from .core.options import ListOptions
from .core.rate_limit import RateSnapshot
from .core.response import Response
from .core.transport import Transport, SessionTransport
from .core.exceptions import (
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

# Library stays silent unless the application configures logging
logging.getLogger('packet_client').addHandler(logging.NullHandler())

try:
    __version__ = version("packet-client-core")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = LIBRARY_VERSION

__all__ = [
    # Core
    "Client",
    "new_client",
    "Transport",
    "SessionTransport",
    "Response",

    # Config
    "ClientConfig",
    "TimeoutConfig",
    "USER_AGENT",

    # Data
    "JSONTarget",
    "RawSink",
    "ListOptions",
    "RateSnapshot",

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

    # Version
    "__version__",
]
