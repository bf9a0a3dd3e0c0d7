from __future__ import annotations

import pytest

from boardsync.contracts.exceptions import FeatureLoadError
from boardsync.contracts.feature import FeatureStatus, Subtask
from boardsync.features.hasher import ContentHasher
from boardsync.features.parser import FeatureParser

CONTENT = """# Feature: CSV Export

**Priority:** High
**Complexity:** medium
**Estimated Sessions:** 2-3 sessions

## Description
Let users export their data.

Second paragraph.

## Subtasks
### Phase 1: Backend
1. [x] Add endpoint
2. [ ] Stream rows
### Phase 2: UI
- [X] Button
3. Document it

## Notes
1. not a subtask
"""


def test_parse_extracts_all_fields() -> None:
    feature = FeatureParser().parse(CONTENT, key="roadmap/planned/001.md", status=FeatureStatus.PLANNED)

    assert feature is not None
    assert feature.key == "roadmap/planned/001.md"
    assert feature.title == "CSV Export"
    assert feature.status == FeatureStatus.PLANNED
    assert feature.priority == "High"
    assert feature.complexity == "medium"
    assert feature.estimated_sessions == "2-3 sessions"
    assert feature.description == "Let users export their data.\n\nSecond paragraph."
    assert feature.fingerprint == ContentHasher().hash(CONTENT)


def test_parse_subtasks_tracks_phases_and_completion() -> None:
    feature = FeatureParser().parse(CONTENT, key="k.md", status=FeatureStatus.BACKLOG)

    assert feature is not None
    assert feature.subtasks == [
        Subtask(text="Add endpoint", completed=True, phase="Phase 1: Backend"),
        Subtask(text="Stream rows", completed=False, phase="Phase 1: Backend"),
        Subtask(text="Document it", completed=False, phase="Phase 2: UI"),
    ]


def test_parse_returns_none_without_title() -> None:
    assert FeatureParser().parse("# Just notes\n", key="k.md", status=FeatureStatus.BACKLOG) is None


@pytest.mark.parametrize("heading", ["# Feature: Export", "### Feature:   Export  "])
def test_title_accepts_any_heading_level(heading: str) -> None:
    feature = FeatureParser().parse(f"{heading}\n", key="k.md", status=FeatureStatus.BACKLOG)

    assert feature is not None
    assert feature.title == "Export"


def test_missing_optional_fields_are_none() -> None:
    feature = FeatureParser().parse("# Feature: Bare\n", key="k.md", status=FeatureStatus.BACKLOG)

    assert feature is not None
    assert feature.priority is None
    assert feature.complexity is None
    assert feature.estimated_sessions is None
    assert feature.description is None
    assert feature.subtasks == []


def test_parse_subtasks_accepts_unnumbered_checkboxes() -> None:
    subtasks = FeatureParser.parse_subtasks("[ ] one\n  [x] two\nplain text\n")

    assert subtasks == [Subtask(text="one"), Subtask(text="two", completed=True)]


def test_crlf_bytes_parse_like_lf_but_fingerprint_differs() -> None:
    parser = FeatureParser()
    lf = parser.parse(CONTENT.encode("utf-8"), key="k.md", status=FeatureStatus.BACKLOG)
    crlf = parser.parse(CONTENT.replace("\n", "\r\n").encode("utf-8"), key="k.md", status=FeatureStatus.BACKLOG)

    assert lf is not None and crlf is not None
    assert crlf.title == lf.title
    assert crlf.description == lf.description
    assert crlf.subtasks == lf.subtasks
    assert crlf.fingerprint != lf.fingerprint
    assert crlf.fingerprint == ContentHasher().hash(CONTENT.replace("\n", "\r\n").encode("utf-8"))


def test_parse_rejects_invalid_utf8() -> None:
    with pytest.raises(FeatureLoadError, match="k.md"):
        FeatureParser().parse(b"# Feature: X\n\xff", key="k.md", status=FeatureStatus.BACKLOG)
