"""Public API surface for boardsync."""

__version__ = "1.0.0"

from boardsync.config import load_config
from boardsync.contracts.config import SyncConfig
from boardsync.contracts.exceptions import (
    AuthenticationError,
    BoardSyncError,
    ConfigError,
    FeatureLoadError,
    NotFoundError,
    ProviderError,
    SyncError,
)
from boardsync.contracts.feature import Feature, FeatureFields, FeatureStatus, Project, Subtask
from boardsync.contracts.provider import Provider
from boardsync.contracts.renderer import BodyRenderer
from boardsync.contracts.sync import FeatureOutcome, SyncAction, SyncResult, SyncState
from boardsync.engine import SyncEngine, SyncProgress
from boardsync.features import ContentHasher, FeatureParser, FeatureScanner
from boardsync.persistence import SyncStateStore
from boardsync.providers import create_provider
from boardsync.renderers import create_renderer
from boardsync.sdk import BoardSync

__all__ = [
    "AuthenticationError",
    "BoardSync",
    "BoardSyncError",
    "BodyRenderer",
    "ConfigError",
    "ContentHasher",
    "Feature",
    "FeatureFields",
    "FeatureLoadError",
    "FeatureOutcome",
    "FeatureParser",
    "FeatureScanner",
    "FeatureStatus",
    "NotFoundError",
    "Project",
    "Provider",
    "ProviderError",
    "Subtask",
    "SyncAction",
    "SyncConfig",
    "SyncEngine",
    "SyncError",
    "SyncProgress",
    "SyncResult",
    "SyncState",
    "SyncStateStore",
    "__version__",
    "create_provider",
    "create_renderer",
    "load_config",
]
