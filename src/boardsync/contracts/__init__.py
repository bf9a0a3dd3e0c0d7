"""Core contracts shared across boardsync layers."""

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
from boardsync.contracts.feature import STATUS_ORDER, Feature, FeatureFields, FeatureStatus, Project, Subtask
from boardsync.contracts.provider import Provider
from boardsync.contracts.renderer import Block, BodyRenderer
from boardsync.contracts.sync import FeatureOutcome, SyncAction, SyncResult, SyncState

__all__ = [
    "STATUS_ORDER",
    "AuthenticationError",
    "Block",
    "BoardSyncError",
    "BodyRenderer",
    "ConfigError",
    "Feature",
    "FeatureFields",
    "FeatureLoadError",
    "FeatureOutcome",
    "FeatureStatus",
    "NotFoundError",
    "Project",
    "Provider",
    "ProviderError",
    "Subtask",
    "SyncAction",
    "SyncConfig",
    "SyncError",
    "SyncResult",
    "SyncState",
]
