"""Exception hierarchy for boardsync."""

from __future__ import annotations

from typing import Any


class BoardSyncError(Exception):
    """Base exception for all boardsync errors."""


class ConfigError(BoardSyncError):
    """Configuration loading or validation failure."""


class FeatureLoadError(BoardSyncError):
    """Feature file could not be read."""


class ProviderError(BoardSyncError):
    """Base provider operation failure.

    *payload* carries the decoded error body returned by the remote API, if any.
    """

    def __init__(self, message: str, *, payload: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class NotFoundError(ProviderError):
    """Remote page does not exist (stale id)."""

    def __init__(
        self,
        message: str,
        *,
        page_id: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.page_id = page_id


class SyncError(BoardSyncError):
    """Engine-level synchronization failure."""
