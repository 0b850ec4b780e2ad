"""Progress notifications for the connection loop."""

from __future__ import annotations

import logging
from typing import Protocol
from urllib.parse import urlsplit

from prometheus_client import Counter

logger = logging.getLogger("tps_utils.connect")

CONNECT_ATTEMPTS = Counter("tps_connect_attempts_total", "Node connection attempts", ["node"])
CONNECT_FAILURES = Counter("tps_connect_failures_total", "Failed node connection attempts", ["node"])
CONNECT_EXHAUSTED = Counter("tps_connect_exhausted_total", "Connections abandoned after the last attempt")


def node_label(endpoint: str) -> str:
    """Reduce an endpoint to ``scheme://host[:port]`` for metric labels.

    Credentials in the userinfo part, the path and the query are dropped.
    """
    parts = urlsplit(endpoint)
    host = parts.netloc.rpartition("@")[2]
    if not parts.scheme or not host:
        return "unknown"
    return f"{parts.scheme}://{host}"


class Observer(Protocol):
    def on_attempt(self, attempt: int, endpoint: str) -> None:
        ...

    def on_failure(self, endpoint: str, error: BaseException) -> None:
        ...

    def on_exhausted(self, message: str) -> None:
        ...


class LoggingObserver:
    """Reports connection progress to the log and the process metrics."""

    def __init__(self, log: logging.Logger = logger) -> None:
        self._log = log

    def on_attempt(self, attempt: int, endpoint: str) -> None:
        CONNECT_ATTEMPTS.labels(node=node_label(endpoint)).inc()
        self._log.info("Attempt #%s: Connecting to %s", attempt, endpoint)

    def on_failure(self, endpoint: str, error: BaseException) -> None:
        CONNECT_FAILURES.labels(node=node_label(endpoint)).inc()
        self._log.warning("API client %s error: %r", endpoint, error)

    def on_exhausted(self, message: str) -> None:
        CONNECT_EXHAUSTED.inc()
        self._log.error("%s", message)


__all__ = [
    "CONNECT_ATTEMPTS",
    "CONNECT_EXHAUSTED",
    "CONNECT_FAILURES",
    "LoggingObserver",
    "Observer",
    "node_label",
]
