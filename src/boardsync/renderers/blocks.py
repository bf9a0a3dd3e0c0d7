"""Notion block rendering for feature and project pages."""

from __future__ import annotations

from typing import Any

from boardsync.contracts.feature import Feature, Project, Subtask
from boardsync.contracts.renderer import Block, BodyRenderer

# Notion rejects rich_text content longer than 2000 characters.
MAX_TEXT_CHUNK = 1900
README_EXCERPT_CHARS = 500


def _text(content: str, **annotations: Any) -> dict[str, Any]:
    rich: dict[str, Any] = {"type": "text", "text": {"content": content}}
    if annotations:
        rich["annotations"] = annotations
    return rich


def _block(block_type: str, **payload: Any) -> Block:
    return {"object": "block", "type": block_type, block_type: payload}


def chunk_text(text: str, size: int = MAX_TEXT_CHUNK) -> list[str]:
    return [text[start : start + size] for start in range(0, len(text), size)]


def board_setup_hint(project_name: str) -> str:
    return "\n".join(
        [
            "Add a linked view of your Features database here:",
            "1. Type /linked",
            '2. Select "Linked view of database"',
            "3. Choose your Features database",
            f"4. Filter by: Project → contains → {project_name}",
            '5. Change view to "Board" and group by Status',
        ]
    )


class NotionBlockRenderer(BodyRenderer):
    def render_feature(self, feature: Feature) -> list[Block]:
        blocks: list[Block] = []

        if feature.estimated_sessions:
            blocks.append(
                _block("paragraph", rich_text=[_text(f"Estimated sessions: {feature.estimated_sessions}", bold=True)])
            )

        if feature.description:
            for chunk in chunk_text(feature.description):
                blocks.append(_block("paragraph", rich_text=[_text(chunk)]))

        if feature.subtasks:
            blocks.append(_block("divider"))
            blocks.append(_block("heading_2", rich_text=[_text("📋 Subtasks")]))
            blocks.extend(self._subtask_blocks(feature.subtasks))

        blocks.append(_block("divider"))
        blocks.append(
            _block("paragraph", rich_text=[_text(f"📁 Source: {feature.key}", color="gray", italic=True)])
        )
        return blocks

    def render_project(self, project: Project) -> list[Block]:
        blocks: list[Block] = []
        if project.readme:
            excerpt = project.readme[:README_EXCERPT_CHARS]
            if len(project.readme) > README_EXCERPT_CHARS:
                excerpt += "..."
            blocks.append(_block("callout", rich_text=[_text(excerpt)], icon={"emoji": "📖"}))

        blocks.append(_block("divider"))
        blocks.append(
            _block(
                "callout",
                rich_text=[_text(board_setup_hint(project.name))],
                icon={"emoji": "⚙️"},
                color="gray_background",
            )
        )
        return blocks

    @staticmethod
    def _subtask_blocks(subtasks: list[Subtask]) -> list[Block]:
        blocks: list[Block] = []
        current_phase: str | None = None
        for subtask in subtasks:
            if subtask.phase and subtask.phase != current_phase:
                current_phase = subtask.phase
                blocks.append(_block("heading_3", rich_text=[_text(subtask.phase)]))
            blocks.append(_block("to_do", rich_text=[_text(subtask.text)], checked=subtask.completed))
        return blocks
