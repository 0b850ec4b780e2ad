"""JSON-RPC client for substrate nodes."""

from __future__ import annotations

import itertools
import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from .config import DEFAULT_REQUEST_TIMEOUT, Runtime
from .errors import NodeClientError
from .models import RpcRequest, RpcResponse, RuntimeVersion

logger = logging.getLogger(__name__)

_SCHEME_MAP = {"ws://": "http://", "wss://": "https://"}


def http_url(url: str) -> str:
    """Map a websocket endpoint onto the node's HTTP RPC endpoint."""
    for prefix, replacement in _SCHEME_MAP.items():
        if url.startswith(prefix):
            return replacement + url[len(prefix):]
    return url


class NodeClient:
    def __init__(
        self,
        url: str,
        runtime: Optional[Runtime] = None,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._runtime = runtime
        self._client = httpx.AsyncClient(base_url=http_url(url), timeout=timeout, transport=transport)
        self._ids = itertools.count(1)
        self._genesis_hash: Optional[str] = None
        self._runtime_version: Optional[RuntimeVersion] = None

    @classmethod
    async def from_url(
        cls,
        url: str,
        runtime: Optional[Runtime] = None,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "NodeClient":
        """Open a session and fetch the chain facts every later call relies on."""
        client = cls(url, runtime, timeout=timeout, transport=transport)
        try:
            await client._bootstrap()
        except BaseException:
            await client.close()
            raise
        return client

    async def __aenter__(self) -> "NodeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def url(self) -> str:
        return self._url

    @property
    def runtime(self) -> Optional[Runtime]:
        return self._runtime

    @property
    def genesis_hash(self) -> Optional[str]:
        return self._genesis_hash

    @property
    def runtime_version(self) -> Optional[RuntimeVersion]:
        return self._runtime_version

    async def _bootstrap(self) -> None:
        genesis = await self.request("chain_getBlockHash", [0])
        if not isinstance(genesis, str):
            raise NodeClientError(self._url, "Node did not report a genesis hash")
        version = await self.request("state_getRuntimeVersion")
        try:
            runtime_version = RuntimeVersion.model_validate(version)
        except ValidationError as exc:
            raise NodeClientError(self._url, "Malformed runtime version", cause=exc) from exc
        self._genesis_hash = genesis
        self._runtime_version = runtime_version
        logger.debug(
            "Connected to %s genesis=%s spec=%s/%s",
            self._url,
            genesis,
            runtime_version.spec_name,
            runtime_version.spec_version,
        )

    async def request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        body = RpcRequest(id=next(self._ids), method=method, params=params or [])
        try:
            response = await self._client.post("", json=body.model_dump())
            response.raise_for_status()
            reply = RpcResponse.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            raise NodeClientError(
                self._url, f"RPC {method} returned status {exc.response.status_code}", cause=exc
            ) from exc
        except httpx.HTTPError as exc:
            raise NodeClientError(self._url, f"RPC {method} failed: {exc}", cause=exc) from exc
        except (ValueError, ValidationError) as exc:
            raise NodeClientError(self._url, f"RPC {method} returned a malformed reply", cause=exc) from exc
        if reply.error is not None:
            raise NodeClientError(self._url, f"RPC {method} error {reply.error.code}: {reply.error.message}")
        return reply.result

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["NodeClient", "http_url"]
