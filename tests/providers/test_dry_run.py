from __future__ import annotations

import pytest

from boardsync.contracts.config import SyncConfig
from boardsync.contracts.exceptions import ConfigError
from boardsync.contracts.feature import Feature, FeatureFields, FeatureStatus, Project
from boardsync.contracts.sync import SyncState
from boardsync.engine import SyncEngine
from boardsync.providers import DryRunProvider, NotionProvider, create_provider
from boardsync.renderers import NotionBlockRenderer


@pytest.mark.asyncio
async def test_dry_run_provider_allocates_placeholder_ids() -> None:
    fields = FeatureFields(title="Export", status=FeatureStatus.BACKLOG)

    async with DryRunProvider() as provider:
        project_id = await provider.create_group("exporter", [])
        first = await provider.create_record(project_id, fields, [])
        second = await provider.create_record(project_id, fields, [])

    assert project_id == "dry-run-1"
    assert (first, second) == ("dry-run-2", "dry-run-3")


@pytest.mark.asyncio
async def test_dry_run_provider_assumes_known_ids_exist_until_archived() -> None:
    provider = DryRunProvider()

    assert await provider.get_record("page-from-state") is True
    assert await provider.find_group_by_name("exporter") is None
    assert await provider.find_record_by_title_and_group("Export", "p") is None
    await provider.archive_record("page-from-state")
    assert await provider.get_record("page-from-state") is False


@pytest.mark.asyncio
async def test_list_record_ids_is_unsupported_by_default() -> None:
    assert await DryRunProvider().list_record_ids("p") is None


def test_create_provider(sample_config: SyncConfig) -> None:
    assert isinstance(create_provider("notion", sample_config), NotionProvider)
    assert isinstance(create_provider("dry-run", sample_config), DryRunProvider)
    with pytest.raises(ConfigError):
        create_provider("jira", sample_config)


@pytest.mark.asyncio
async def test_find_record_by_title_sees_pages_placed_this_run() -> None:
    provider = DryRunProvider()
    fields = FeatureFields(title="Export", status=FeatureStatus.PLANNED)
    page_id = await provider.create_record("proj-1", fields, [])

    assert await provider.find_record_by_title_and_group("Export", "proj-1") == page_id
    assert await provider.find_record_by_title_and_group("Export", "proj-2") is None
    assert await provider.find_record_by_title_and_group("Import", "proj-1") is None

    await provider.archive_record(page_id)
    assert await provider.find_record_by_title_and_group("Export", "proj-1") is None


@pytest.mark.asyncio
async def test_moved_feature_from_earlier_run_reports_create_and_archive(sample_config: SyncConfig) -> None:
    state = SyncState(
        project_page_id="proj-1",
        feature_page_ids={"roadmap/backlog/001.md": "real-page"},
        content_hashes={"roadmap/backlog/001.md": "aaaa0001"},
    )
    moved = Feature(key="roadmap/completed/001.md", title="Export", status=FeatureStatus.COMPLETED, fingerprint="b")
    engine = SyncEngine(DryRunProvider(), NotionBlockRenderer(), sample_config, dry_run=True)

    result = await engine.sync(Project(name="exporter"), [moved], state)

    assert result.created == 1
    assert result.archived == ["roadmap/backlog/001.md"]
