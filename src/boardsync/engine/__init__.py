from boardsync.engine.engine import SyncEngine
from boardsync.engine.progress import NullSyncProgress, SyncProgress

__all__ = ["NullSyncProgress", "SyncEngine", "SyncProgress"]
