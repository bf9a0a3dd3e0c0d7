"""Provider factory."""

from __future__ import annotations

from boardsync.contracts.config import SyncConfig
from boardsync.contracts.exceptions import ConfigError
from boardsync.contracts.provider import Provider
from boardsync.providers.dry_run import DryRunProvider
from boardsync.providers.notion import NotionProvider

PROVIDERS: tuple[str, ...] = ("notion", "dry-run")


def create_provider(name: str, config: SyncConfig) -> Provider:
    if name == "notion":
        return NotionProvider(
            token=config.token,
            projects_db_id=config.projects_db_id,
            features_db_id=config.features_db_id,
            notion_version=config.notion_version,
        )
    if name == "dry-run":
        return DryRunProvider()
    raise ConfigError(f"Unknown provider: {name}")
