"""Bounded-retry connection bootstrap for node RPC endpoints."""

from __future__ import annotations

import asyncio
import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional

import httpx

from .client import NodeClient
from .config import NodeSettings, RetryConfig, Runtime
from .errors import ConnectionExhaustedError
from .observer import LoggingObserver, Observer

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], Awaitable[Any]]
Sleep = Callable[[float], Awaitable[Any]]


@dataclass
class ConnectionEstablisher:
    """Opens a client for an endpoint, retrying with a fixed delay.

    The establisher holds no per-call state, so one instance may serve any
    number of concurrent ``connect`` calls.
    """

    config: RetryConfig = field(default_factory=RetryConfig)
    factory: ClientFactory = NodeClient.from_url
    observer: Observer = field(default_factory=LoggingObserver)
    sleep: Sleep = asyncio.sleep

    def _notify(self, event: str, *args: Any) -> None:
        try:
            getattr(self.observer, event)(*args)
        except Exception:
            logger.exception("Observer %s failed", event)

    async def connect(self, endpoint: str) -> Any:
        """Return a connected client or raise ``ConnectionExhaustedError``.

        Every attempt failure is retried alike. The delay also follows the
        last failed attempt, before the terminal error is raised.
        """
        for attempt in range(1, self.config.max_attempts + 1):
            self._notify("on_attempt", attempt, endpoint)
            try:
                return await self.factory(endpoint)
            except Exception as exc:
                self._notify("on_failure", endpoint, exc)
            await self.sleep(self.config.retry_delay)

        error = ConnectionExhaustedError(endpoint, self.config.max_attempts)
        self._notify("on_exhausted", str(error))
        raise error


async def connect(
    url: str,
    *,
    settings: Optional[NodeSettings] = None,
    config: Optional[RetryConfig] = None,
    runtime: Optional[Runtime] = None,
    timeout: Optional[float] = None,
    observer: Optional[Observer] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> NodeClient:
    """Try ``config.max_attempts`` times to connect to the node at ``url``.

    Explicit ``config``, ``runtime`` and ``timeout`` take precedence over
    ``settings``.
    """
    settings = settings or NodeSettings()
    establisher = ConnectionEstablisher(
        config=config or settings.retry,
        factory=functools.partial(
            NodeClient.from_url,
            runtime=runtime or settings.runtime,
            timeout=settings.request_timeout if timeout is None else timeout,
            transport=transport,
        ),
        observer=observer or LoggingObserver(),
    )
    return await establisher.connect(url)


__all__ = ["ClientFactory", "ConnectionEstablisher", "connect"]
