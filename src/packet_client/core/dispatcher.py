# src/packet_client/core/dispatcher.py
"""
Response dispatch.

Executes one prepared request through a Transport and routes the body to the
caller's destination. Order of operations for every response:

1. rate-limit headers are parsed and reported (even for error statuses)
2. the status is classified; non-2xx raises ApiError carrying the wrapper
3. the body goes to the destination: RawSink copies it verbatim,
   JSONTarget decodes it, no destination drains and discards it

The underlying response is closed before dispatch returns or raises.
Nothing is retried.
"""

from contextlib import closing
from typing import Callable, Iterator, Optional

import requests

from .destinations import Destination, JSONTarget, RawSink
from .error_handler import check_response
from .exceptions import DecodeError
from .rate_limit import RateSnapshot
from .response import Response
from .transport import Transport

CHUNK_SIZE = 8192

RateCallback = Callable[[RateSnapshot], None]


def _validate_destination(destination: Optional[Destination]) -> None:
    if destination is not None and not isinstance(destination, (JSONTarget, RawSink)):
        raise TypeError(
            f"destination must be JSONTarget, RawSink or None, "
            f"got {type(destination).__name__}"
        )


def _iter_body(http_response: requests.Response) -> Iterator[bytes]:
    return http_response.iter_content(chunk_size=CHUNK_SIZE)


def dispatch(
    transport: Transport,
    request: requests.PreparedRequest,
    destination: Optional[Destination] = None,
    on_rate: Optional[RateCallback] = None,
) -> Response:
    """
    Send ``request`` and populate ``destination``.

    Args:
        transport: Transport used to send the request
        request: Prepared request (see build_request)
        destination: JSONTarget, RawSink or None
        on_rate: Called with the parsed rate snapshot before the status is
            checked; not called when the transport itself fails

    Returns:
        Response wrapper with ``rate`` populated

    Raises:
        TypeError: unsupported destination type (nothing is sent)
        requests.exceptions.RequestException: transport failure, unchanged
        ApiError: status outside 200-299; ``err.response`` holds the wrapper
        DecodeError: 2xx body is not valid JSON for a JSONTarget, or the
            target factory rejected the decoded document
    """
    _validate_destination(destination)

    http_response = transport.send(request)

    with closing(http_response):
        response = Response(http_response)
        snapshot = response.populate_rate()
        if on_rate is not None:
            on_rate(snapshot)

        check_response(response)

        if isinstance(destination, RawSink):
            destination.copy(_iter_body(http_response))
        elif isinstance(destination, JSONTarget):
            try:
                destination.decode(http_response.content)
            except (ValueError, LookupError, TypeError, AttributeError) as e:
                raise DecodeError(response, e) from e
        else:
            for _ in _iter_body(http_response):
                pass

    return response
