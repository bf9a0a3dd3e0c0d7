from boardsync.cli.commands.hooks import run_hooks
from boardsync.cli.commands.sync import format_sync_summary, run_sync

__all__ = ["format_sync_summary", "run_hooks", "run_sync"]
