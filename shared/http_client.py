"""
Process-wide HTTP client factory.

One pooled transport adapter is shared by the whole process. requests.Session
is not safe to share between threads, so every thread gets its own session
mounted on that adapter. Sessions live as long as the factory; callers must
not close them.
"""
import logging
import threading
from functools import lru_cache
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from shared.config import get_settings

logger = logging.getLogger(__name__)

POOL_CONNECTIONS = 10
POOL_MAXSIZE = 20


class TimeoutSession(requests.Session):
    """Session that applies a default timeout to every request."""

    def __init__(self, timeout: Optional[float] = None):
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


class HttpClientFactory:
    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        self._adapter = HTTPAdapter(pool_connections=POOL_CONNECTIONS, pool_maxsize=POOL_MAXSIZE)
        self._local = threading.local()
        self._lock = threading.Lock()
        self._sessions = []

    def create_client(self) -> requests.Session:
        """Return the session bound to the calling thread, creating it on first use."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = TimeoutSession(timeout=self.timeout)
            session.mount("https://", self._adapter)
            session.mount("http://", self._adapter)
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
            logger.debug(f"[HttpClientFactory] Created session for thread {threading.get_ident()}")
        return session

    def close(self) -> None:
        """Release pooled connections and forget every session."""
        with self._lock:
            sessions, self._sessions = self._sessions, []
        self._local = threading.local()
        self._adapter.close()
        logger.info(f"[HttpClientFactory] Closed {len(sessions)} session(s)")


@lru_cache(maxsize=1)
def get_http_client_factory() -> HttpClientFactory:
    settings = get_settings()
    return HttpClientFactory(timeout=settings.http_timeout_seconds)
