"""Sync command."""

from __future__ import annotations

import argparse

from boardsync.cli.common import format_status_breakdown, plural
from boardsync.cli.progress.rich import RichSyncProgress
from boardsync.config import load_config
from boardsync.contracts.config import SyncConfig
from boardsync.contracts.sync import SyncAction, SyncResult
from boardsync.renderers.blocks import board_setup_hint
from boardsync.sdk import BoardSync, state_path_for


def format_sync_summary(result: SyncResult, config: SyncConfig) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    lines = [
        "",
        f"boardsync - sync complete ({mode})",
        "",
        f"  Project:   {result.project_name} ({result.project_action.value})",
        "  Features:  {} ({})".format(
            plural(len(result.outcomes), "feature"),
            format_status_breakdown(outcome.status for outcome in result.outcomes),
        ),
        f"  Created:   {result.created}",
        f"  Updated:   {result.updated}",
        f"  Unchanged: {result.unchanged}",
        f"  Archived:  {len(result.archived)}",
    ]

    errors = result.errors
    if errors:
        lines.append(f"  Errors:    {len(errors)}")
        for outcome in errors:
            lines.append(f"    - {outcome.key}: {outcome.error}")
    for warning in result.warnings:
        lines.append(f"  Warning:   {warning}")

    lines.append("")
    lines.append(f"  Sync state: {state_path_for(config, dry_run=result.dry_run)}")
    lines.append(f"  Last sync:  {result.state.last_sync}")

    if result.project_action == SyncAction.CREATED and not result.dry_run:
        lines.append("")
        lines.append("  New project page created. To see the kanban board:")
        lines.extend(f"    {line}" for line in board_setup_hint(result.project_name).splitlines()[1:])

    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


async def run_sync(args: argparse.Namespace) -> SyncResult:
    config = load_config(args.project_dir, max_concurrent=args.max_concurrent)

    if not args.verbose:
        with RichSyncProgress() as progress:
            result = await BoardSync.from_config(config, progress=progress).sync(dry_run=args.dry_run)
    else:
        result = await BoardSync.from_config(config).sync(dry_run=args.dry_run)

    print(format_sync_summary(result, config))
    return result


__all__ = ["format_sync_summary", "run_sync"]
