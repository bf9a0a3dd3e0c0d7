"""In-memory dry-run provider."""

from __future__ import annotations

from types import TracebackType

from boardsync.contracts.feature import FeatureFields
from boardsync.contracts.provider import Provider
from boardsync.contracts.renderer import Block


class DryRunProvider(Provider):
    """Provider that returns deterministic placeholders without network calls.

    Ids remembered in the sync state are assumed to still exist, so unchanged
    and edited features are reported as a real run would report them. Titles
    are only known for pages placed during this run, so a moved feature file
    shows up as a create plus an archive instead of a single update.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._archived: set[str] = set()
        self.titles: dict[str, str] = {}
        self._groups: dict[str, str] = {}

    async def __aenter__(self) -> DryRunProvider:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None

    async def find_group_by_name(self, name: str) -> str | None:
        return None

    async def create_group(self, name: str, children: list[Block]) -> str:
        page_id = self._next_id()
        self.titles[page_id] = name
        return page_id

    async def update_group(self, group_id: str, name: str) -> None:
        self.titles[group_id] = name

    async def find_record_by_title_and_group(self, title: str, group_id: str) -> str | None:
        for record_id, record_group in self._groups.items():
            if record_group == group_id and self.titles.get(record_id) == title and record_id not in self._archived:
                return record_id
        return None

    async def get_record(self, record_id: str) -> bool:
        return record_id not in self._archived

    async def create_record(self, group_id: str, fields: FeatureFields, body: list[Block]) -> str:
        page_id = self._next_id()
        self.titles[page_id] = fields.title
        self._groups[page_id] = group_id
        return page_id

    async def update_record(self, record_id: str, group_id: str, fields: FeatureFields, body: list[Block]) -> None:
        self.titles[record_id] = fields.title
        self._groups[record_id] = group_id

    async def archive_record(self, record_id: str) -> None:
        self._archived.add(record_id)

    def _next_id(self) -> str:
        self._counter += 1
        return f"dry-run-{self._counter}"
