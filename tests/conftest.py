"""Shared test fixtures for boardsync tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from boardsync.contracts.config import SyncConfig

FEATURE_TEMPLATE = """# Feature: {title}

**Priority:** {priority}
**Complexity:** Medium
**Estimated Sessions:** 2-3

## Description
{description}

## Subtasks
### Phase 1
1. [x] Design the schema
2. [ ] Write the exporter
### Phase 2
3. Ship it
"""


@pytest.fixture
def sample_config(tmp_path: Path) -> SyncConfig:
    """A minimal valid SyncConfig rooted at tmp_path."""
    return SyncConfig(
        token="secret_token",
        projects_db_id="projects-db",
        features_db_id="features-db",
        project_root=tmp_path,
        max_concurrent=2,
    )


@pytest.fixture
def write_feature(tmp_path: Path) -> Callable[..., Path]:
    """Write a feature file below tmp_path/roadmap and return its path."""

    def _write(
        relative: str,
        title: str = "Export",
        *,
        priority: str = "High",
        description: str = "Export data as CSV.",
        content: str | None = None,
    ) -> Path:
        path = tmp_path / "roadmap" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if content is None:
            content = FEATURE_TEMPLATE.format(title=title, priority=priority, description=description)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
