"""Configuration loading from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import ValidationError

from boardsync.contracts.config import SyncConfig
from boardsync.contracts.exceptions import ConfigError

ENV_TOKEN = "NOTION_TOKEN"
ENV_PROJECTS_DB_ID = "NOTION_PROJECTS_DB_ID"
ENV_FEATURES_DB_ID = "NOTION_FEATURES_DB_ID"

_REQUIRED_ENV: dict[str, str] = {
    ENV_TOKEN: "Notion integration token",
    ENV_PROJECTS_DB_ID: "Projects database ID",
    ENV_FEATURES_DB_ID: "Features database ID",
}


def read_environment(project_root: Path, environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Merge ``<project_root>/.env`` with the process environment (which wins)."""
    merged: dict[str, str] = {}
    env_file = project_root / ".env"
    if env_file.is_file():
        merged.update({key: value for key, value in dotenv_values(env_file).items() if value is not None})
    merged.update(os.environ if environ is None else environ)
    return merged


def load_config(
    project_root: str | Path = ".",
    *,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> SyncConfig:
    """Build a ``SyncConfig`` for *project_root*.

    Every missing required variable is reported in a single ``ConfigError``
    so the user can fix them all at once.
    """
    root = Path(project_root).expanduser().resolve()
    env = read_environment(root, environ)

    missing = [name for name in _REQUIRED_ENV if not (env.get(name) or "").strip()]
    if missing:
        details = "; ".join(f"{name} ({_REQUIRED_ENV[name]})" for name in missing)
        raise ConfigError(f"missing required environment variables: {details}. Add them to your .env file.")

    try:
        return SyncConfig(
            token=env[ENV_TOKEN],
            projects_db_id=env[ENV_PROJECTS_DB_ID],
            features_db_id=env[ENV_FEATURES_DB_ID],
            project_root=root,
            **{key: value for key, value in overrides.items() if value is not None},
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
