from boardsync.cli.progress.rich import RichSyncProgress

__all__ = ["RichSyncProgress"]
