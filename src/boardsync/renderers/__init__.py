"""Renderer factory."""

from __future__ import annotations

from boardsync.contracts.renderer import BodyRenderer
from boardsync.renderers.blocks import NotionBlockRenderer

RENDERERS: dict[str, type[BodyRenderer]] = {
    "notion-blocks": NotionBlockRenderer,
}


def create_renderer(name: str = "notion-blocks") -> BodyRenderer:
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise ValueError(f"Unknown renderer: {name}")
    return renderer_cls()


__all__ = ["NotionBlockRenderer", "RENDERERS", "create_renderer"]
