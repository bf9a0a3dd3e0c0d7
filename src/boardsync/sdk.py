"""SDK composition root for boardsync."""

from __future__ import annotations

import logging
from pathlib import Path

from boardsync.contracts.config import SyncConfig
from boardsync.contracts.exceptions import ConfigError
from boardsync.contracts.provider import Provider
from boardsync.contracts.renderer import BodyRenderer
from boardsync.contracts.sync import SyncResult, SyncState
from boardsync.engine import SyncEngine
from boardsync.engine.progress import SyncProgress
from boardsync.features import FeatureScanner, load_project
from boardsync.persistence import SyncStateStore, dry_run_path
from boardsync.providers import DryRunProvider, create_provider
from boardsync.renderers import create_renderer

_LOG = logging.getLogger(__name__)


def state_path_for(config: SyncConfig, *, dry_run: bool) -> Path:
    if not dry_run:
        return config.mapping_path
    return dry_run_path(config.mapping_path)


class BoardSync:
    """boardsync SDK public API."""

    def __init__(
        self,
        *,
        config: SyncConfig,
        renderer: BodyRenderer,
        provider: Provider | None = None,
        scanner: FeatureScanner | None = None,
        progress: SyncProgress | None = None,
    ) -> None:
        self._config = config
        self._renderer = renderer
        self._provider = provider
        self._scanner = scanner or FeatureScanner(config)
        self._progress = progress

    @classmethod
    def from_config(
        cls,
        config: SyncConfig,
        *,
        renderer_name: str = "notion-blocks",
        progress: SyncProgress | None = None,
    ) -> BoardSync:
        try:
            renderer = create_renderer(renderer_name)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        return cls(config=config, renderer=renderer, progress=progress)

    async def sync(self, *, dry_run: bool = False) -> SyncResult:
        """Run one full sync of the configured project directory.

        Sync state is written even when the run fails part-way, so progress
        made before the failure is kept.
        """
        store = SyncStateStore(self._config.mapping_path)
        state = store.load()
        project = load_project(self._config)
        features = self._scanner.scan()
        _LOG.info("Project %s: %d feature(s) found", project.name, len(features))

        provider = self._resolve_provider(dry_run)
        engine = SyncEngine(provider, self._renderer, self._config, dry_run=dry_run, progress=self._progress)
        try:
            async with provider:
                result = await engine.sync(project, features, state)
        except BaseException:
            self._persist(state, dry_run=dry_run)
            raise

        self._persist(state, dry_run=dry_run)
        return result.model_copy(update={"warnings": list(self._scanner.warnings)})

    def _resolve_provider(self, dry_run: bool) -> Provider:
        if self._provider is not None:
            return self._provider
        if dry_run:
            return DryRunProvider()
        return create_provider("notion", self._config)

    def _persist(self, state: SyncState, *, dry_run: bool) -> None:
        SyncStateStore(state_path_for(self._config, dry_run=dry_run)).save(state)
