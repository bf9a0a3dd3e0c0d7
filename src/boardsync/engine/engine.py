"""Reconciliation engine: local features to remote project/feature pages."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import TypeVar

from boardsync.contracts.config import SyncConfig
from boardsync.contracts.exceptions import NotFoundError, ProviderError
from boardsync.contracts.feature import Feature, FeatureFields, Project
from boardsync.contracts.provider import Provider
from boardsync.contracts.renderer import BodyRenderer
from boardsync.contracts.sync import FeatureOutcome, SyncAction, SyncResult, SyncState
from boardsync.engine.progress import NullSyncProgress, SyncProgress

T = TypeVar("T")

_LOG = logging.getLogger(__name__)


def utc_timestamp(now: datetime) -> str:
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SyncEngine:
    """Decide, per feature, whether to skip, create or update its remote page.

    The engine mutates the ``SyncState`` it is given; persisting it is the
    caller's job.
    """

    def __init__(
        self,
        provider: Provider,
        renderer: BodyRenderer,
        config: SyncConfig,
        *,
        dry_run: bool = False,
        progress: SyncProgress | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._provider = provider
        self._renderer = renderer
        self._config = config
        self._dry_run = dry_run
        self._semaphore = asyncio.Semaphore(config.max_concurrent)
        self._progress: SyncProgress = progress or NullSyncProgress()
        self._clock = clock or (lambda: datetime.now(UTC))

    async def sync(self, project: Project, features: list[Feature], state: SyncState) -> SyncResult:
        prior_ids = dict(state.feature_page_ids)

        project_page_id, project_action = await self._resolve_project(project, state)
        state.project_page_id = project_page_id

        live_ids = await self._list_live_ids(project_page_id)
        outcomes = await self._sync_features(features, state, prior_ids, project_page_id, live_ids)
        archived = await self._archive_removed(features, state, prior_ids)

        state.last_sync = utc_timestamp(self._clock())
        return SyncResult(
            project_name=project.name,
            project_page_id=project_page_id,
            project_action=project_action,
            outcomes=outcomes,
            archived=archived,
            state=state,
            dry_run=self._dry_run,
        )

    async def _resolve_project(self, project: Project, state: SyncState) -> tuple[str, SyncAction]:
        self._progress.phase_start("Project")
        try:
            page_id = state.project_page_id
            if page_id and not await self._guarded(self._provider.get_record(page_id)):
                _LOG.info("Project page %s no longer exists", page_id)
                page_id = None
            if not page_id:
                page_id = await self._guarded(self._provider.find_group_by_name(project.name))

            if page_id:
                try:
                    await self._guarded(self._provider.update_group(page_id, project.name))
                    self._progress.phase_done("Project")
                    return page_id, SyncAction.UPDATED
                except NotFoundError:
                    _LOG.info("Project page %s vanished during rename; creating a new one", page_id)

            children = self._renderer.render_project(project)
            page_id = await self._guarded(self._provider.create_group(project.name, children))
            self._progress.phase_done("Project")
            return page_id, SyncAction.CREATED
        except BaseException as exc:
            self._progress.phase_error("Project", exc)
            raise

    async def _sync_features(
        self,
        features: list[Feature],
        state: SyncState,
        prior_ids: dict[str, str],
        project_page_id: str,
        live_ids: set[str] | None,
    ) -> list[FeatureOutcome]:
        current_keys = {feature.key for feature in features}
        # Pages already owned by a current key; a title match on one of these is a collision.
        owners: dict[str, str] = {page_id: key for key, page_id in prior_ids.items() if key in current_keys}
        outcomes: list[FeatureOutcome | None] = [None] * len(features)

        self._progress.phase_start("Features", total=len(features))
        try:
            async with asyncio.TaskGroup() as tg:
                for index, feature in enumerate(features):
                    tg.create_task(
                        self._sync_feature_into(index, outcomes, feature, state, project_page_id, live_ids, owners)
                    )
            self._progress.phase_done("Features")
        except BaseException as exc:
            self._progress.phase_error("Features", exc)
            raise
        return [outcome for outcome in outcomes if outcome is not None]

    async def _sync_feature_into(
        self,
        index: int,
        outcomes: list[FeatureOutcome | None],
        feature: Feature,
        state: SyncState,
        project_page_id: str,
        live_ids: set[str] | None,
        owners: dict[str, str],
    ) -> None:
        try:
            page_id, action = await self._sync_feature(feature, state, project_page_id, live_ids, owners)
        except ProviderError as exc:
            _LOG.warning("Failed to sync %s: %s", feature.key, exc)
            outcomes[index] = FeatureOutcome(
                key=feature.key,
                title=feature.title,
                status=feature.status,
                action=SyncAction.FAILED,
                error=str(exc),
            )
        else:
            state.remember(feature.key, page_id, feature.fingerprint)
            outcomes[index] = FeatureOutcome(
                key=feature.key,
                title=feature.title,
                status=feature.status,
                action=action,
                page_id=page_id,
            )
        self._progress.item_done("Features")

    async def _sync_feature(
        self,
        feature: Feature,
        state: SyncState,
        project_page_id: str,
        live_ids: set[str] | None,
        owners: dict[str, str],
    ) -> tuple[str, SyncAction]:
        page_id = state.feature_page_ids.get(feature.key)

        if page_id and state.content_hashes.get(feature.key) == feature.fingerprint:
            if await self._page_exists(page_id, live_ids):
                return page_id, SyncAction.UNCHANGED
            _LOG.info("Page for %s was deleted remotely; resyncing", feature.key)
            page_id = None

        fields = FeatureFields.from_feature(feature)
        body = self._renderer.render_feature(feature)

        if not page_id:
            page_id = await self._find_by_title(feature, project_page_id, owners)

        if page_id:
            try:
                await self._guarded(self._provider.update_record(page_id, project_page_id, fields, body))
                _LOG.debug("Updated %s (%s)", feature.key, page_id)
                return page_id, SyncAction.UPDATED
            except NotFoundError:
                _LOG.info("Page %s for %s is gone; creating a new one", page_id, feature.key)

        page_id = await self._guarded(self._provider.create_record(project_page_id, fields, body))
        owners[page_id] = feature.key
        _LOG.debug("Created %s (%s)", feature.key, page_id)
        return page_id, SyncAction.CREATED

    async def _find_by_title(self, feature: Feature, project_page_id: str, owners: dict[str, str]) -> str | None:
        page_id = await self._guarded(self._provider.find_record_by_title_and_group(feature.title, project_page_id))
        if page_id is None:
            return None
        owner = owners.get(page_id)
        if owner is not None and owner != feature.key:
            _LOG.info("Title '%s' matches the page of %s; creating a separate page", feature.title, owner)
            return None
        owners[page_id] = feature.key
        return page_id

    async def _list_live_ids(self, project_page_id: str) -> set[str] | None:
        try:
            return await self._guarded(self._provider.list_record_ids(project_page_id))
        except ProviderError as exc:
            _LOG.warning("Listing pages of project %s failed; checking pages one by one: %s", project_page_id, exc)
            return None

    async def _page_exists(self, page_id: str, live_ids: set[str] | None) -> bool:
        # The listing only covers pages related to this project, so a miss is confirmed individually.
        if live_ids is not None and page_id in live_ids:
            return True
        return await self._guarded(self._provider.get_record(page_id))

    async def _archive_removed(self, features: list[Feature], state: SyncState, prior_ids: dict[str, str]) -> list[str]:
        current_keys = {feature.key for feature in features}
        removed = sorted(key for key in prior_ids if key not in current_keys)
        archived: list[str] = []

        self._progress.phase_start("Archive", total=len(removed))
        try:
            for key in removed:
                page_id = prior_ids[key]
                in_use = any(state.feature_page_ids.get(current) == page_id for current in current_keys)
                if not in_use:
                    try:
                        await self._guarded(self._provider.archive_record(page_id))
                        archived.append(key)
                    except ProviderError as exc:
                        _LOG.debug("Archive of %s (%s) failed: %s", key, page_id, exc)
                state.forget(key)
                self._progress.item_done("Archive")
            self._progress.phase_done("Archive")
        except BaseException as exc:
            self._progress.phase_error("Archive", exc)
            raise
        return archived

    async def _guarded(self, op: Awaitable[T]) -> T:
        async with self._semaphore:
            return await op
