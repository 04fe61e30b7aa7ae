# src/packet_client/core/session_manager.py
"""
Thread-local requests.Session storage for SessionTransport.

Concurrent calls from different threads each get their own Session, so
the only state shared between them is the client's rate-limit snapshot.
"""
import threading
import weakref
from typing import Callable, Set

import requests


class ThreadSafeSessionManager:
    """
    Manages thread-local requests.Session instances.

    Sessions are created lazily on first access per thread and tracked
    through weak references so close_all() can reach every thread's session.

    Example:
        >>> manager = ThreadSafeSessionManager(requests.Session)
        >>> session = manager.get_session()
        >>> manager.close_all()
    """

    def __init__(self, session_factory: Callable[[], requests.Session]):
        self._session_factory = session_factory
        self._local = threading.local()
        self._all_sessions: Set[weakref.ref] = set()
        self._sessions_lock = threading.Lock()

    def get_session(self) -> requests.Session:
        """Return the current thread's session, creating it if needed."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
            with self._sessions_lock:
                self._all_sessions.add(weakref.ref(session, self._discard_ref))
        return session

    def _discard_ref(self, ref: weakref.ref) -> None:
        with self._sessions_lock:
            self._all_sessions.discard(ref)

    def close_all(self) -> None:
        """
        Close sessions from all threads.

        Safe to call multiple times.
        """
        self._local.session = None

        with self._sessions_lock:
            refs = list(self._all_sessions)
            self._all_sessions.clear()

        for ref in refs:
            session = ref()
            if session is not None:
                session.close()

    def get_active_sessions_count(self) -> int:
        """Number of sessions that are still alive across all threads."""
        with self._sessions_lock:
            return sum(1 for ref in self._all_sessions if ref() is not None)
