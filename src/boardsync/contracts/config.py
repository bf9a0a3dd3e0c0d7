"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

NOTION_API_VERSION = "2022-06-28"


class SyncConfig(BaseModel):
    token: str
    projects_db_id: str
    features_db_id: str
    project_root: Path = Path(".")
    roadmap_dir: str = "roadmap"
    mapping_file: str = ".notion-sync.json"
    readme_file: str = "README.md"
    feature_extension: str = ".md"
    excluded_prefixes: tuple[str, ...] = ("_",)
    max_concurrent: int = Field(default=3, ge=1, le=10)
    notion_version: str = NOTION_API_VERSION

    model_config = {"frozen": True}

    @field_validator("token", "projects_db_id", "features_db_id")
    @classmethod
    def _strip_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty string")
        return value

    @property
    def roadmap_path(self) -> Path:
        return self.project_root / self.roadmap_dir

    @property
    def mapping_path(self) -> Path:
        return self.project_root / self.mapping_file

    @property
    def readme_path(self) -> Path:
        return self.project_root / self.readme_file
