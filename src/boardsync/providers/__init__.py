from boardsync.providers.dry_run import DryRunProvider
from boardsync.providers.factory import PROVIDERS, create_provider
from boardsync.providers.notion import NotionProvider

__all__ = ["PROVIDERS", "DryRunProvider", "NotionProvider", "create_provider"]
