from __future__ import annotations

import argparse
import stat
import subprocess
from pathlib import Path
from typing import Any

import pytest

from boardsync.cli.commands.hooks import (
    CRON_SCHEDULE,
    POST_COMMIT_HOOK,
    cron_line,
    install_cron,
    install_git_hook,
    merge_crontab,
    run_hooks,
)
from boardsync.contracts.exceptions import ConfigError


def test_install_git_hook_writes_executable_script(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()

    hook_path = install_git_hook(tmp_path)

    assert hook_path == tmp_path / ".git" / "hooks" / "post-commit"
    assert hook_path.read_text(encoding="utf-8") == POST_COMMIT_HOOK
    assert hook_path.stat().st_mode & stat.S_IXUSR


def test_install_git_hook_requires_git_repository(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not a git repository"):
        install_git_hook(tmp_path)


def test_cron_line_quotes_project_dir() -> None:
    line = cron_line(Path("/srv/my app"))

    assert line.startswith(CRON_SCHEDULE)
    assert "cd '/srv/my app' && boardsync sync >> notion-sync.log 2>&1" in line


def test_merge_crontab_replaces_previous_entry() -> None:
    existing = "0 1 * * * backup\n0 9 * * 1 cd /old && boardsync sync >> notion-sync.log 2>&1\n\n"

    merged = merge_crontab(existing, "NEW LINE")

    assert merged == "0 1 * * * backup\nNEW LINE\n"


def test_install_cron_pipes_merged_table(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list[tuple[list[str], dict[str, Any]]] = []

    def _fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        calls.append((cmd, kwargs))
        if cmd == ["crontab", "-l"]:
            return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="no crontab for user")
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr("boardsync.cli.commands.hooks.subprocess.run", _fake_run)

    line = install_cron(tmp_path)

    assert [cmd for cmd, _ in calls] == [["crontab", "-l"], ["crontab", "-"]]
    assert calls[1][1]["input"] == line + "\n"


def test_install_cron_wraps_failures(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def _missing(cmd: list[str], **_kwargs: Any) -> None:
        raise FileNotFoundError("crontab")

    monkeypatch.setattr("boardsync.cli.commands.hooks.subprocess.run", _missing)

    with pytest.raises(ConfigError, match="failed to update crontab"):
        install_cron(tmp_path)


def test_run_hooks_print_only(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    args = argparse.Namespace(hooks_command="install-cron", project_dir=str(tmp_path), print_only=True)

    assert run_hooks(args) == 0
    assert capsys.readouterr().out.strip() == cron_line(tmp_path.resolve())


def test_run_hooks_install_git(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    args = argparse.Namespace(hooks_command="install-git", project_dir=str(tmp_path))

    assert run_hooks(args) == 0
    assert "Git hook installed" in capsys.readouterr().out
