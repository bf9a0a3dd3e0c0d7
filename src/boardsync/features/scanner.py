"""Roadmap tree scanning."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from boardsync.contracts.config import SyncConfig
from boardsync.contracts.exceptions import FeatureLoadError
from boardsync.contracts.feature import STATUS_ORDER, Feature, FeatureStatus
from boardsync.features.parser import FeatureParser

_LOG = logging.getLogger(__name__)

STATUS_FOLDERS: dict[str, FeatureStatus] = {
    "backlog": FeatureStatus.BACKLOG,
    "planned": FeatureStatus.PLANNED,
    "in-progress": FeatureStatus.IN_PROGRESS,
    "completed": FeatureStatus.COMPLETED,
}

_STATUS_RANK = {status: rank for rank, status in enumerate(STATUS_ORDER)}


def normalize_folder_name(name: str) -> str:
    return name.strip().lower().replace("_", "-").replace(" ", "-")


def status_for_key(key: str) -> FeatureStatus:
    """Status from the nearest ancestor folder with a known name, else Backlog."""
    for folder in reversed(PurePosixPath(key).parent.parts):
        status = STATUS_FOLDERS.get(normalize_folder_name(folder))
        if status is not None:
            return status
    return FeatureStatus.BACKLOG


class FeatureScanner:
    """Walk the roadmap directory and parse every feature file in it."""

    def __init__(self, config: SyncConfig, parser: FeatureParser | None = None) -> None:
        self._config = config
        self._parser = parser or FeatureParser()
        self.warnings: list[str] = []

    def scan(self) -> list[Feature]:
        self.warnings = []
        root = self._config.roadmap_path
        if not root.is_dir():
            _LOG.debug("Roadmap directory %s not found; nothing to sync", root)
            return []

        features: list[Feature] = []
        for path in self._iter_files(root):
            key = self._key_for(path)
            try:
                feature = self._parser.parse(self._read(path), key=key, status=status_for_key(key))
            except FeatureLoadError as exc:
                self.warnings.append(str(exc))
                _LOG.warning("%s", exc)
                continue
            if feature is None:
                _LOG.debug("Skipping %s: no feature title", key)
                continue
            features.append(feature)

        return sorted(features, key=lambda feature: (_STATUS_RANK[feature.status], feature.key))

    def _iter_files(self, root: Path) -> list[Path]:
        matched: list[Path] = []
        for path in root.rglob("*"):
            if not path.is_file():
                continue
            if path.suffix != self._config.feature_extension:
                continue
            if path.name.startswith(self._config.excluded_prefixes):
                continue
            matched.append(path)
        return matched

    def _key_for(self, path: Path) -> str:
        try:
            relative = path.relative_to(self._config.project_root)
        except ValueError:
            relative = path
        return relative.as_posix()

    @staticmethod
    def _read(path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FeatureLoadError(f"could not read {path}: {exc}") from exc
