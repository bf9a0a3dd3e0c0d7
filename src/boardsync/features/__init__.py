"""Local feature discovery."""

from boardsync.features.hasher import ContentHasher
from boardsync.features.parser import FeatureParser
from boardsync.features.project import detect_project_name, load_project
from boardsync.features.scanner import STATUS_FOLDERS, FeatureScanner, status_for_key

__all__ = [
    "STATUS_FOLDERS",
    "ContentHasher",
    "FeatureParser",
    "FeatureScanner",
    "detect_project_name",
    "load_project",
    "status_for_key",
]
