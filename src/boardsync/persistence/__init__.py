"""Local sync state persistence."""

from boardsync.persistence.sync_state import SyncStateStore, dry_run_path

__all__ = ["SyncStateStore", "dry_run_path"]
