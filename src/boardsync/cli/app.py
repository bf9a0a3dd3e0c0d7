"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import asyncio
import logging
import sys

from boardsync.cli.commands import run_hooks, run_sync
from boardsync.cli.parser import build_parser
from boardsync.contracts.exceptions import AuthenticationError, ConfigError, ProviderError, SyncError

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIG = 3
EXIT_PROVIDER = 4
EXIT_SYNC = 5
EXIT_PARTIAL = 6


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "hooks":
            return run_hooks(args)
        result = asyncio.run(run_sync(args))
        return EXIT_PARTIAL if result.errors else EXIT_OK
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PROVIDER
    except SyncError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_SYNC
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED


__all__ = ["main"]
