"""
Response destinations.

The caller declares up front what it wants done with a successful body:

- ``JSONTarget`` - decode the body as JSON and keep the result
- ``RawSink`` - copy the body verbatim into a binary writer, never parse it

Passing no destination at all drains and discards the body.

Example:
    >>> target = JSONTarget(factory=lambda data: data["plans"])
    >>> client.do(client.new_request("GET", "plans"), target)
    >>> target.value
    [{'id': 'p1'}]

    >>> with open("userdata.bin", "wb") as f:
    ...     client.do(client.new_request("GET", "devices/abc/userdata"), RawSink(f))
"""

import json
from typing import Any, BinaryIO, Callable, Iterable, Optional, Union


class JSONTarget:
    """
    Decode the response body as JSON.

    Args:
        factory: Optional callable applied to the decoded document, e.g. to
            unwrap an envelope or build a model object.

    Attributes:
        value: Decoded (and factory-transformed) value, None until populated
        populated: True once a body was successfully decoded into the target
    """

    def __init__(self, factory: Optional[Callable[[Any], Any]] = None):
        self.factory = factory
        self.value: Any = None
        self.populated = False

    def decode(self, body: bytes) -> Any:
        """
        Decode ``body`` and store it.

        Raises:
            ValueError: Body is not valid JSON (json.JSONDecodeError or
                UnicodeDecodeError); the target is left unmodified.
            LookupError, TypeError, AttributeError: raised by the factory
                for an unexpected document shape (missing key, empty list,
                wrong type); the target is left unmodified. Any other
                exception from the factory propagates as is.
        """
        document = json.loads(body)
        value = self.factory(document) if self.factory else document
        self.value = value
        self.populated = True
        return value

    def __repr__(self) -> str:
        return f"JSONTarget(populated={self.populated})"


class RawSink:
    """
    Copy the response body verbatim into a binary writer.

    Args:
        sink: Any object with ``write(bytes)`` (file opened in ``wb``,
            ``io.BytesIO``, socket wrapper, ...)

    Attributes:
        bytes_written: Total bytes copied by the last call
    """

    def __init__(self, sink: BinaryIO):
        self.sink = sink
        self.bytes_written = 0

    def copy(self, chunks: Iterable[bytes]) -> int:
        """Write every chunk to the sink and return the byte count."""
        written = 0
        for chunk in chunks:
            if chunk:  # skip keep-alive chunks
                self.sink.write(chunk)
                written += len(chunk)
        self.bytes_written = written
        return written

    def __repr__(self) -> str:
        return f"RawSink({self.sink!r})"


Destination = Union[JSONTarget, RawSink]
