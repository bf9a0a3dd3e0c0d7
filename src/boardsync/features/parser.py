"""Feature markdown parsing."""

from __future__ import annotations

import re

from boardsync.contracts.exceptions import FeatureLoadError
from boardsync.contracts.feature import Feature, FeatureStatus, Subtask
from boardsync.features.hasher import ContentHasher

_TITLE_RE = re.compile(r"^#+ Feature:\s*(.+)$", re.MULTILINE)
_PRIORITY_RE = re.compile(r"\*\*Priority:\*\*\s*(\w+)", re.IGNORECASE)
_COMPLEXITY_RE = re.compile(r"\*\*Complexity:\*\*\s*(\w+)", re.IGNORECASE)
_SESSIONS_RE = re.compile(r"\*\*Estimated Sessions:\*\*\s*(.+)", re.IGNORECASE)
_PHASE_RE = re.compile(r"^###\s+(.+)$")
_CHECKBOX_RE = re.compile(r"^\s*(?:\d+\.\s*)?\[([xX ])\]\s+(.+)$")
_NUMBERED_RE = re.compile(r"^\s*\d+\.\s+(?!\[)(.+)$")


def _section(content: str, heading: str) -> str | None:
    pattern = re.compile(rf"^## {re.escape(heading)}[ \t]*\n(.*?)(?=^## |^# |\Z)", re.MULTILINE | re.DOTALL)
    match = pattern.search(content)
    if match is None:
        return None
    return match.group(1).strip()


def _first(pattern: re.Pattern[str], content: str) -> str | None:
    match = pattern.search(content)
    if match is None:
        return None
    return match.group(1).strip()


class FeatureParser:
    """Extract structured feature data from a markdown file."""

    def __init__(self, hasher: ContentHasher | None = None) -> None:
        self._hasher = hasher or ContentHasher()

    def parse(self, content: str | bytes, *, key: str, status: FeatureStatus) -> Feature | None:
        """Parse *content*; returns ``None`` when the file has no feature title.

        The fingerprint covers *content* exactly as given, so pass the raw file
        bytes to have line-ending changes count as changes.
        """
        fingerprint = self._hasher.hash(content)
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise FeatureLoadError(f"{key} is not valid UTF-8: {exc}") from exc
        content = content.replace("\r\n", "\n").replace("\r", "\n")

        title = _first(_TITLE_RE, content)
        if not title:
            return None

        subtasks_section = _section(content, "Subtasks")
        return Feature(
            key=key,
            title=title,
            status=status,
            priority=_first(_PRIORITY_RE, content),
            complexity=_first(_COMPLEXITY_RE, content),
            estimated_sessions=_first(_SESSIONS_RE, content),
            description=_section(content, "Description") or None,
            subtasks=self.parse_subtasks(subtasks_section) if subtasks_section else [],
            fingerprint=fingerprint,
        )

    @staticmethod
    def parse_subtasks(section: str) -> list[Subtask]:
        subtasks: list[Subtask] = []
        phase: str | None = None
        for line in section.splitlines():
            phase_match = _PHASE_RE.match(line)
            if phase_match:
                phase = phase_match.group(1).strip()
                continue

            checkbox_match = _CHECKBOX_RE.match(line)
            if checkbox_match:
                subtasks.append(
                    Subtask(
                        text=checkbox_match.group(2).strip(),
                        completed=checkbox_match.group(1).lower() == "x",
                        phase=phase,
                    )
                )
                continue

            numbered_match = _NUMBERED_RE.match(line)
            if numbered_match:
                subtasks.append(Subtask(text=numbered_match.group(1).strip(), phase=phase))
        return subtasks
