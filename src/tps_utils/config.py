"""Configuration objects shared by the TPS tooling."""

from __future__ import annotations

import enum
import math
import os
from dataclasses import dataclass, field
from typing import Optional

#: Maximal number of connection attempts.
MAX_ATTEMPTS = 10
#: Delay period in seconds between failed connection attempts.
RETRY_DELAY = 1.0
#: Default derivation path for pre-funded accounts.
DERIVATION = "//Sender/"

DEFAULT_REQUEST_TIMEOUT = 30.0


class Runtime(str, enum.Enum):
    """Network metadata schema the RPC client talks to."""

    # Use when sending TPS to validators.
    ROCOCO = "rococo"
    # polkadot-parachain runtime, use when sending TPS to parachains.
    TICK = "tick"

    @property
    def metadata_path(self) -> str:
        return f"{self.value}-meta.scale"

    @classmethod
    def select(cls, name: Optional[str]) -> "Runtime":
        names = [part.strip().lower() for part in (name or "").split(",") if part.strip()]
        if not names:
            raise ValueError("Either `rococo`, or `tick` must be selected")
        if len(set(names)) > 1:
            raise ValueError("`rococo` and `tick` are mutually exclusive")
        try:
            return cls(names[0])
        except ValueError:
            raise ValueError(f"Unknown runtime {names[0]!r}; expected `rococo` or `tick`") from None


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = MAX_ATTEMPTS
    retry_delay: float = RETRY_DELAY

    def __post_init__(self) -> None:
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise ValueError("max_attempts must be an integer")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be positive")
        if isinstance(self.retry_delay, bool) or not isinstance(self.retry_delay, (int, float)):
            raise ValueError("retry_delay must be a number")
        if not math.isfinite(self.retry_delay) or self.retry_delay < 0:
            raise ValueError("retry_delay must be finite and non-negative")

    @classmethod
    def from_env(cls) -> "RetryConfig":
        attempts = int(os.environ.get("TPS_CONNECT_MAX_ATTEMPTS", str(MAX_ATTEMPTS)))
        delay = float(os.environ.get("TPS_CONNECT_RETRY_DELAY", str(RETRY_DELAY)))
        return cls(max_attempts=attempts, retry_delay=delay)


@dataclass(frozen=True)
class NodeSettings:
    runtime: Optional[Runtime] = None
    retry: RetryConfig = field(default_factory=RetryConfig)
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        if isinstance(self.request_timeout, bool) or not isinstance(self.request_timeout, (int, float)):
            raise ValueError("request_timeout must be a number")
        if not math.isfinite(self.request_timeout) or self.request_timeout <= 0:
            raise ValueError("request_timeout must be finite and positive")

    @classmethod
    def from_env(cls) -> "NodeSettings":
        runtime = Runtime.select(os.environ.get("TPS_RUNTIME"))
        timeout = float(os.environ.get("TPS_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT)))
        return cls(runtime=runtime, retry=RetryConfig.from_env(), request_timeout=timeout)


__all__ = [
    "DERIVATION",
    "DEFAULT_REQUEST_TIMEOUT",
    "MAX_ATTEMPTS",
    "NodeSettings",
    "RETRY_DELAY",
    "RetryConfig",
    "Runtime",
]
