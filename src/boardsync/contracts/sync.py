"""Sync state and result contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from boardsync.contracts.feature import FeatureStatus


class SyncState(BaseModel):
    """Persisted correlation of local feature keys to remote page ids.

    Field aliases match the ``.notion-sync.json`` layout so existing mapping
    files keep working. Unknown keys in the file are carried through.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    project_page_id: str | None = Field(default=None, alias="projectPageId")
    last_sync: str | None = Field(default=None, alias="lastSync")
    feature_page_ids: dict[str, str] = Field(default_factory=dict, alias="featurePageIds")
    content_hashes: dict[str, str] = Field(default_factory=dict, alias="contentHashes")

    def forget(self, key: str) -> None:
        self.feature_page_ids.pop(key, None)
        self.content_hashes.pop(key, None)

    def remember(self, key: str, page_id: str, fingerprint: str) -> None:
        self.feature_page_ids[key] = page_id
        self.content_hashes[key] = fingerprint


class SyncAction(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class FeatureOutcome(BaseModel):
    key: str
    title: str
    status: FeatureStatus
    action: SyncAction
    page_id: str | None = None
    error: str | None = None


class SyncResult(BaseModel):
    project_name: str
    project_page_id: str
    project_action: SyncAction
    outcomes: list[FeatureOutcome] = Field(default_factory=list)
    archived: list[str] = Field(default_factory=list)
    state: SyncState
    warnings: list[str] = Field(default_factory=list)
    dry_run: bool = False

    def count(self, action: SyncAction) -> int:
        return sum(1 for outcome in self.outcomes if outcome.action == action)

    @property
    def created(self) -> int:
        return self.count(SyncAction.CREATED)

    @property
    def updated(self) -> int:
        return self.count(SyncAction.UPDATED)

    @property
    def unchanged(self) -> int:
        return self.count(SyncAction.UNCHANGED)

    @property
    def errors(self) -> list[FeatureOutcome]:
        return [outcome for outcome in self.outcomes if outcome.action == SyncAction.FAILED]
