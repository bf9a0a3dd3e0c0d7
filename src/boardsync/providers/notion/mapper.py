"""Translation between boardsync contracts and Notion API payloads."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from boardsync.contracts.feature import FeatureFields

T = TypeVar("T")

# Notion caps children per create/append request.
MAX_CHILDREN_PER_REQUEST = 100


def title_property(text: str) -> dict[str, Any]:
    return {"title": [{"text": {"content": text}}]}


def project_properties(name: str) -> dict[str, Any]:
    return {"Name": title_property(name)}


def feature_properties(fields: FeatureFields, project_page_id: str) -> dict[str, Any]:
    """Property patch for a feature page; unset optional attributes are omitted."""
    properties: dict[str, Any] = {
        "Name": title_property(fields.title),
        "Status": {"status": {"name": fields.status.value}},
        "Project": {"relation": [{"id": project_page_id}]},
    }
    if fields.priority:
        properties["Priority"] = {"select": {"name": fields.priority}}
    if fields.complexity:
        properties["Complexity"] = {"select": {"name": fields.complexity}}
    return properties


def title_filter(title: str) -> dict[str, Any]:
    return {"property": "Name", "title": {"equals": title}}


def relation_filter(project_page_id: str) -> dict[str, Any]:
    return {"property": "Project", "relation": {"contains": project_page_id}}


def feature_filter(title: str, project_page_id: str) -> dict[str, Any]:
    return {"and": [title_filter(title), relation_filter(project_page_id)]}


def is_live_page(payload: dict[str, Any]) -> bool:
    return not payload.get("archived", False) and not payload.get("in_trash", False)


def is_archived_error(payload: dict[str, Any]) -> bool:
    """Notion answers edits of archived pages with a 400 validation error."""
    if payload.get("code") != "validation_error":
        return False
    message = str(payload.get("message", "")).lower()
    return "archived" in message or "in trash" in message


def chunked(items: list[T], size: int = MAX_CHILDREN_PER_REQUEST) -> Iterator[list[T]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]
