"""Feature and project contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class FeatureStatus(StrEnum):
    BACKLOG = "Backlog"
    PLANNED = "Planned"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


# Display/sort order of the kanban columns.
STATUS_ORDER: tuple[FeatureStatus, ...] = (
    FeatureStatus.IN_PROGRESS,
    FeatureStatus.PLANNED,
    FeatureStatus.BACKLOG,
    FeatureStatus.COMPLETED,
)


class Subtask(BaseModel):
    text: str
    completed: bool = False
    phase: str | None = None


class Feature(BaseModel):
    key: str
    title: str
    status: FeatureStatus = FeatureStatus.BACKLOG
    priority: str | None = None
    complexity: str | None = None
    estimated_sessions: str | None = None
    description: str | None = None
    subtasks: list[Subtask] = Field(default_factory=list)
    fingerprint: str


class FeatureFields(BaseModel):
    """Property set written to a feature page."""

    title: str
    status: FeatureStatus
    priority: str | None = None
    complexity: str | None = None

    @classmethod
    def from_feature(cls, feature: Feature) -> FeatureFields:
        return cls(
            title=feature.title,
            status=feature.status,
            priority=feature.priority,
            complexity=feature.complexity,
        )


class Project(BaseModel):
    name: str
    readme: str | None = None
