"""Renderer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from boardsync.contracts.feature import Feature, Project

Block = dict[str, Any]


class BodyRenderer(ABC):
    @abstractmethod
    def render_feature(self, feature: Feature) -> list[Block]: ...  # pragma: no cover

    @abstractmethod
    def render_project(self, project: Project) -> list[Block]: ...  # pragma: no cover
