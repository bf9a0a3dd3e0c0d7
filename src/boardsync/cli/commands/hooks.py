"""Automation installers: git post-commit hook and weekly cron job."""

from __future__ import annotations

import argparse
import shlex
import subprocess
from pathlib import Path

from boardsync.contracts.exceptions import ConfigError

LOG_FILE = "notion-sync.log"
CRON_SCHEDULE = "0 9 * * 1"
_CRON_MARKER = "boardsync sync"

POST_COMMIT_HOOK = f"""#!/bin/sh
# Sync roadmap features to Notion after each commit
cd "$(git rev-parse --show-toplevel)"
echo "Syncing to Notion..." >> {LOG_FILE}
boardsync sync --verbose >> {LOG_FILE} 2>&1
echo "Sync complete at $(date)" >> {LOG_FILE}
"""


def install_git_hook(project_dir: Path) -> Path:
    git_dir = project_dir / ".git"
    if not git_dir.is_dir():
        raise ConfigError(f"not a git repository: {project_dir}. Run this from your project root.")
    hooks_dir = git_dir / "hooks"
    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook_path = hooks_dir / "post-commit"
    hook_path.write_text(POST_COMMIT_HOOK, encoding="utf-8")
    hook_path.chmod(0o755)
    return hook_path


def cron_line(project_dir: Path) -> str:
    return f"{CRON_SCHEDULE} cd {shlex.quote(str(project_dir))} && {_CRON_MARKER} >> {LOG_FILE} 2>&1"


def merge_crontab(existing: str, line: str) -> str:
    """Replace any previous boardsync entry with *line*."""
    kept = [entry for entry in existing.splitlines() if entry.strip() and _CRON_MARKER not in entry]
    return "\n".join([*kept, line]) + "\n"


def install_cron(project_dir: Path) -> str:
    line = cron_line(project_dir)
    try:
        current = subprocess.run(["crontab", "-l"], capture_output=True, text=True, check=False)
        existing = current.stdout if current.returncode == 0 else ""
        subprocess.run(["crontab", "-"], input=merge_crontab(existing, line), text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ConfigError(f"failed to update crontab: {exc}") from exc
    return line


def run_hooks(args: argparse.Namespace) -> int:
    project_dir = Path(args.project_dir).expanduser().resolve()

    if args.hooks_command == "install-git":
        hook_path = install_git_hook(project_dir)
        print(f"Git hook installed: {hook_path}")
        print("  Notion will sync automatically after each git commit.")
        print(f"  Logs written to: {project_dir / LOG_FILE}")
        return 0

    if args.print_only:
        print(cron_line(project_dir))
        return 0
    line = install_cron(project_dir)
    print("Weekly Notion sync installed (Mondays at 9 AM):")
    print(f"  {line}")
    print("  To verify: crontab -l")
    return 0


__all__ = ["cron_line", "install_cron", "install_git_hook", "merge_crontab", "run_hooks"]
