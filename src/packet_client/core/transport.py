# src/packet_client/core/transport.py
"""
Transport boundary.

The client never talks to the network directly: it hands a prepared request
to a Transport and gets a requests.Response back. Anything that implements
``send`` works, which is how tests substitute canned responses.

Network failures (DNS, connection refused, timeouts) are raised by the
transport as ``requests.exceptions.RequestException`` subclasses and reach
the caller unchanged.
"""

from abc import ABC, abstractmethod
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from .config import TimeoutConfig
from .session_manager import ThreadSafeSessionManager


class Transport(ABC):
    """Issues a prepared request and returns the response."""

    @abstractmethod
    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """
        Send ``request``.

        The returned response's body may be unread (streamed); the caller is
        responsible for closing it.

        Raises:
            requests.exceptions.RequestException: network-level failure
        """
        pass

    def close(self) -> None:
        """Release transport resources. No-op by default."""
        pass


class SessionTransport(Transport):
    """
    Default transport over requests.Session.

    Each thread gets its own session. Requests are sent with ``stream=True``
    so the dispatcher decides how the body is consumed.

    Args:
        verify_ssl: Verify TLS certificates. Applies to this transport only,
            process-wide defaults are never touched.
        timeout: Connect/read timeouts, None to wait indefinitely

    Example:
        >>> transport = SessionTransport(timeout=TimeoutConfig(connect=5, read=30))
        >>> client = Client("consumer", "key", transport=transport)
    """

    def __init__(self, verify_ssl: bool = True, timeout: Optional[TimeoutConfig] = None):
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self._session_manager = ThreadSafeSessionManager(session_factory=self._create_session)

    def _create_session(self) -> requests.Session:
        session = requests.Session()

        # Connection: close is set per request, retries are never done here
        adapter = HTTPAdapter(max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.verify = self.verify_ssl
        return session

    @property
    def session(self) -> requests.Session:
        """Thread-local session for the calling thread."""
        return self._session_manager.get_session()

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        return self.session.send(
            request,
            stream=True,
            verify=self.verify_ssl,
            timeout=self.timeout.as_tuple() if self.timeout else None,
            allow_redirects=True,
        )

    def close(self) -> None:
        self._session_manager.close_all()
