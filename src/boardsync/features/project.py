"""Local project identity."""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from boardsync.contracts.config import SyncConfig
from boardsync.contracts.feature import Project

_LOG = logging.getLogger(__name__)


def _read_name_from_pyproject(path: Path) -> str | None:
    try:
        payload = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return None
    project = payload.get("project")
    if isinstance(project, dict):
        name = project.get("name")
        if isinstance(name, str) and name.strip():
            return name.strip()
    return None


def _read_name_from_package_json(path: Path) -> str | None:
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return None
    if isinstance(payload, dict):
        name = payload.get("name")
        if isinstance(name, str) and name.strip():
            return name.strip()
    return None


def detect_project_name(project_root: Path) -> str:
    """Project name from pyproject.toml, then package.json, then the directory name."""
    root = project_root.resolve()
    for reader, filename in (
        (_read_name_from_pyproject, "pyproject.toml"),
        (_read_name_from_package_json, "package.json"),
    ):
        name = reader(root / filename)
        if name:
            return name
    return root.name


def read_readme(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        _LOG.warning("Could not read %s: %s", path, exc)
        return None


def load_project(config: SyncConfig) -> Project:
    return Project(name=detect_project_name(config.project_root), readme=read_readme(config.readme_path))
