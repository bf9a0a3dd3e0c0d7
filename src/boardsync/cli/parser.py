"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("boardsync")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boardsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser("sync", help="Sync roadmap features to Notion")
    sync_parser.add_argument("--project-dir", default=".", help="Project root containing roadmap/ (default: .)")
    sync_parser.add_argument("--dry-run", action="store_true", help="Preview mode; no Notion calls are made")
    sync_parser.add_argument(
        "--max-concurrent",
        type=int,
        default=None,
        help="Maximum concurrent Notion requests (1-10, default: 3)",
    )
    sync_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    hooks_parser = subparsers.add_parser("hooks", help="Install automatic sync triggers")
    hooks_subparsers = hooks_parser.add_subparsers(dest="hooks_command", required=True)

    git_parser = hooks_subparsers.add_parser("install-git", help="Install a git post-commit hook")
    git_parser.add_argument("--project-dir", default=".", help="Project root (default: .)")

    cron_parser = hooks_subparsers.add_parser("install-cron", help="Install a weekly cron job (Mondays 9 AM)")
    cron_parser.add_argument("--project-dir", default=".", help="Project root (default: .)")
    cron_parser.add_argument("--print-only", action="store_true", help="Print the crontab line without installing")

    return parser


__all__ = ["build_parser"]
