"""Sync state persistence."""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from boardsync.contracts.exceptions import SyncError
from boardsync.contracts.sync import SyncState

_LOG = logging.getLogger(__name__)

_DEFAULT_MODE = 0o644


def dry_run_path(path: Path) -> Path:
    return Path(f"{path}.dry-run")


class SyncStateStore:
    """Load and save the mapping file that correlates feature keys with pages."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> SyncState:
        if not self.path.exists():
            return SyncState()
        try:
            payload: Any = json.loads(self.path.read_text(encoding="utf-8"))
            return SyncState.model_validate(payload)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            _LOG.warning("Ignoring unreadable sync state %s: %s", self.path, exc)
            return SyncState()

    def save(self, state: SyncState) -> None:
        payload = state.model_dump(mode="json", by_alias=True)
        encoded = json.dumps(payload, indent=2) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            mode = stat.S_IMODE(self.path.stat().st_mode) if self.path.exists() else _DEFAULT_MODE
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(encoded)
                # mkstemp creates the file as 0600.
                os.chmod(tmp_name, mode)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise SyncError(f"failed to persist sync state: {self.path}") from exc
