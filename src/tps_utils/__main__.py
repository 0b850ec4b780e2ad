"""Check that a node accepts RPC connections."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Optional, Sequence

from .config import DEFAULT_REQUEST_TIMEOUT, MAX_ATTEMPTS, RETRY_DELAY, NodeSettings, RetryConfig, Runtime
from .connection import connect
from .errors import ConnectionExhaustedError

logger = logging.getLogger("tps_utils")


def build_parser() -> argparse.ArgumentParser:
    # String defaults go through ``type``, so bad environment values become usage errors.
    env = os.environ
    parser = argparse.ArgumentParser(prog="tps_utils", description=__doc__)
    parser.add_argument("url", help="node RPC endpoint, e.g. ws://127.0.0.1:9944")
    parser.add_argument(
        "--runtime",
        choices=[runtime.value for runtime in Runtime],
        default=None,
        help="network metadata schema (default: $TPS_RUNTIME)",
    )
    parser.add_argument(
        "--max-attempts", type=int, default=env.get("TPS_CONNECT_MAX_ATTEMPTS", str(MAX_ATTEMPTS))
    )
    parser.add_argument(
        "--retry-delay", type=float, default=env.get("TPS_CONNECT_RETRY_DELAY", str(RETRY_DELAY))
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=env.get("TPS_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT)),
        help="per-request timeout in seconds",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> NodeSettings:
    runtime_name = args.runtime or os.environ.get("TPS_RUNTIME")
    return NodeSettings(
        runtime=Runtime.select(runtime_name) if runtime_name else None,
        retry=RetryConfig(max_attempts=args.max_attempts, retry_delay=args.retry_delay),
        request_timeout=args.timeout,
    )


async def probe(url: str, settings: NodeSettings) -> str:
    client = await connect(url, settings=settings)
    async with client:
        version = client.runtime_version
        summary = f"{url} genesis={client.genesis_hash} spec={version.spec_name}/{version.spec_version}"
        if client.runtime is not None:
            summary += f" runtime={client.runtime.value}"
        return summary


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    try:
        summary = asyncio.run(probe(args.url, settings))
    except ConnectionExhaustedError as exc:
        logger.debug("Giving up on %s after %s attempts", exc.endpoint, exc.attempts)
        return 1
    print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
