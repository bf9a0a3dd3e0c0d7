"""Tests for RichSyncProgress and NullSyncProgress."""

from __future__ import annotations

import io

from rich.console import Console

from boardsync.cli.progress import RichSyncProgress
from boardsync.engine.progress import NullSyncProgress, SyncProgress


class TestNullSyncProgress:
    """NullSyncProgress is a no-op implementation."""

    def test_implements_protocol(self) -> None:
        assert issubclass(NullSyncProgress, SyncProgress)

    def test_phase_lifecycle_is_noop(self) -> None:
        progress = NullSyncProgress()
        # Should not raise
        progress.phase_start("Features", total=5)
        progress.item_done("Features")
        progress.phase_done("Features")
        progress.phase_error("Features", RuntimeError("boom"))


def _quiet_progress() -> RichSyncProgress:
    return RichSyncProgress(console=Console(file=io.StringIO(), force_terminal=False))


class TestRichSyncProgress:
    """RichSyncProgress drives Rich progress bars."""

    def test_implements_protocol(self) -> None:
        assert issubclass(RichSyncProgress, SyncProgress)

    def test_context_manager(self) -> None:
        progress = _quiet_progress()
        with progress as p:
            assert p is progress

    def test_determinate_phase(self) -> None:
        with _quiet_progress() as progress:
            progress.phase_start("Features", total=3)
            for _ in range(3):
                progress.item_done("Features")
            progress.phase_done("Features")

            task = progress._progress.tasks[0]
            assert task.completed == 3
            assert task.finished

    def test_indeterminate_phase_completes(self) -> None:
        with _quiet_progress() as progress:
            progress.phase_start("Project", total=None)
            progress.phase_done("Project")

            task = progress._progress.tasks[0]
            assert task.total == 1
            assert task.completed == 1

    def test_unknown_phase_is_noop(self) -> None:
        with _quiet_progress() as progress:
            # Should not raise even when phase was never started.
            progress.item_done("Unknown")
            progress.phase_done("Unknown")
            progress.phase_error("Unknown", RuntimeError("boom"))

    def test_phase_error_fills_error_column(self) -> None:
        with _quiet_progress() as progress:
            progress.phase_start("Archive", total=2)
            progress.phase_error("Archive", RuntimeError("boom"))

            assert progress._progress.tasks[0].fields["error"] == "✗ boom"

    def test_long_errors_are_truncated(self) -> None:
        with _quiet_progress() as progress:
            progress.phase_start("Features", total=1)
            progress.phase_error("Features", RuntimeError("x" * 200))

            error = progress._progress.tasks[0].fields["error"]
            assert len(error) == 60
            assert error.endswith("...")

    def test_empty_phase_finishes(self) -> None:
        with _quiet_progress() as progress:
            progress.phase_start("Archive", total=0)
            progress.phase_done("Archive")

            assert progress._progress.tasks[0].finished
