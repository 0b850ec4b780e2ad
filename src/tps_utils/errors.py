"""Exceptions raised by the connection layer."""

from __future__ import annotations

from typing import Optional


class TpsUtilsError(Exception):
    """Base class for errors raised by this package."""


class NodeClientError(TpsUtilsError):
    """A single attempt to talk to a node failed."""

    def __init__(self, endpoint: str, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"{message} ({endpoint})")
        self.endpoint = endpoint
        self.message = message
        self.cause = cause


class ConnectionExhaustedError(TpsUtilsError):
    """Every connection attempt to a node failed.

    Individual attempt errors are reported to the observer only and are not
    kept here.
    """

    def __init__(self, endpoint: str, attempts: int) -> None:
        super().__init__(f"Failed to connect to {endpoint} after {attempts} attempts")
        self.endpoint = endpoint
        self.attempts = attempts


__all__ = ["ConnectionExhaustedError", "NodeClientError", "TpsUtilsError"]
