from __future__ import annotations

import pytest

from boardsync.contracts.feature import Feature, Project, Subtask
from boardsync.renderers import NotionBlockRenderer, create_renderer
from boardsync.renderers.blocks import MAX_TEXT_CHUNK, chunk_text


def _texts(block: dict) -> str:  # type: ignore[type-arg]
    payload = block[block["type"]]
    return "".join(part["text"]["content"] for part in payload.get("rich_text", []))


def test_render_feature_layout() -> None:
    feature = Feature(
        key="roadmap/planned/001.md",
        title="Export",
        description="Export data.",
        subtasks=[
            Subtask(text="Schema", completed=True, phase="Phase 1"),
            Subtask(text="Writer", phase="Phase 1"),
            Subtask(text="Docs", phase="Phase 2"),
            Subtask(text="Loose end"),
        ],
        fingerprint="h",
    )

    blocks = NotionBlockRenderer().render_feature(feature)

    assert [block["type"] for block in blocks] == [
        "paragraph",
        "divider",
        "heading_2",
        "heading_3",
        "to_do",
        "to_do",
        "heading_3",
        "to_do",
        "to_do",
        "divider",
        "paragraph",
    ]
    assert _texts(blocks[0]) == "Export data."
    assert blocks[4]["to_do"]["checked"] is True
    assert blocks[5]["to_do"]["checked"] is False
    assert _texts(blocks[-1]) == "📁 Source: roadmap/planned/001.md"
    assert blocks[-1]["paragraph"]["rich_text"][0]["annotations"] == {"color": "gray", "italic": True}


def test_render_minimal_feature_has_only_source_footer() -> None:
    blocks = NotionBlockRenderer().render_feature(Feature(key="k.md", title="T", fingerprint="h"))

    assert [block["type"] for block in blocks] == ["divider", "paragraph"]


def test_long_description_is_chunked() -> None:
    description = "x" * (MAX_TEXT_CHUNK * 2 + 10)
    feature = Feature(key="k.md", title="T", description=description, fingerprint="h")
    blocks = NotionBlockRenderer().render_feature(feature)

    paragraphs = [block for block in blocks if block["type"] == "paragraph"][:-1]
    assert [len(_texts(block)) for block in paragraphs] == [MAX_TEXT_CHUNK, MAX_TEXT_CHUNK, 10]


def test_chunk_text_empty() -> None:
    assert chunk_text("") == []


def test_render_project_with_long_readme() -> None:
    blocks = NotionBlockRenderer().render_project(Project(name="exporter", readme="r" * 600))

    assert [block["type"] for block in blocks] == ["callout", "divider", "callout"]
    assert _texts(blocks[0]) == "r" * 500 + "..."
    assert "Project → contains → exporter" in _texts(blocks[2])


def test_render_project_without_readme() -> None:
    blocks = NotionBlockRenderer().render_project(Project(name="exporter"))

    assert [block["type"] for block in blocks] == ["divider", "callout"]


def test_create_renderer() -> None:
    assert isinstance(create_renderer(), NotionBlockRenderer)
    with pytest.raises(ValueError, match="Unknown renderer"):
        create_renderer("html")
