from boardsync.providers.notion.provider import NOTION_API_URL, NotionProvider

__all__ = ["NOTION_API_URL", "NotionProvider"]
