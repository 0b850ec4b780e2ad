"""Shared connection utilities for the TPS tooling."""

from .client import NodeClient
from .config import DERIVATION, MAX_ATTEMPTS, RETRY_DELAY, NodeSettings, RetryConfig, Runtime
from .connection import ConnectionEstablisher, connect
from .errors import ConnectionExhaustedError, NodeClientError, TpsUtilsError
from .observer import LoggingObserver, Observer

__all__ = [
    "ConnectionEstablisher",
    "ConnectionExhaustedError",
    "DERIVATION",
    "LoggingObserver",
    "MAX_ATTEMPTS",
    "NodeClient",
    "NodeClientError",
    "NodeSettings",
    "Observer",
    "RETRY_DELAY",
    "RetryConfig",
    "Runtime",
    "TpsUtilsError",
    "connect",
]
