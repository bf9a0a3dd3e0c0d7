"""Rich-based sync progress display."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn

from boardsync.engine.progress import SyncProgress


class RichSyncProgress(SyncProgress):
    """One Rich row per sync phase: Project, Features, Archive.

    A failed phase keeps its row with the error message next to it::

        with RichSyncProgress() as progress:
            result = await BoardSync.from_config(config, progress=progress).sync()
    """

    _COLORS: ClassVar[dict[str, str]] = {"Project": "cyan", "Features": "green", "Archive": "magenta"}
    _ERROR_WIDTH = 60

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("[{task.fields[color]}]{task.description:<9}[/]"),
            BarColumn(bar_width=None),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            TextColumn("[red]{task.fields[error]}[/]"),
            console=console or Console(stderr=True),
        )
        self._rows: dict[str, TaskID] = {}

    def __enter__(self) -> RichSyncProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._rows[phase] = self._progress.add_task(
            phase, total=total, color=self._COLORS.get(phase, "white"), error=""
        )

    def item_done(self, phase: str) -> None:
        if phase in self._rows:
            self._progress.advance(self._rows[phase])

    def phase_done(self, phase: str) -> None:
        if phase not in self._rows:
            return
        row = self._rows[phase]
        # Project resolution has no item count; show it as a single finished step.
        total = self._progress.tasks[row].total
        finished = 1 if total is None else total
        self._progress.update(row, total=finished, completed=finished)

    def phase_error(self, phase: str, error: BaseException) -> None:
        if phase not in self._rows:
            return
        message = f"✗ {error}"
        if len(message) > self._ERROR_WIDTH:
            message = message[: self._ERROR_WIDTH - 3] + "..."
        self._progress.update(self._rows[phase], error=message)
