"""Provider adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from boardsync.contracts.feature import FeatureFields
from boardsync.contracts.renderer import Block


class Provider(ABC):
    """Remote record capability over the Projects and Features collections."""

    @abstractmethod
    async def __aenter__(self) -> Provider: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def find_group_by_name(self, name: str) -> str | None: ...  # pragma: no cover

    @abstractmethod
    async def create_group(self, name: str, children: list[Block]) -> str: ...  # pragma: no cover

    @abstractmethod
    async def update_group(self, group_id: str, name: str) -> None:
        """Rename a project page. Raises ``NotFoundError`` for a stale id."""

    @abstractmethod
    async def find_record_by_title_and_group(self, title: str, group_id: str) -> str | None: ...  # pragma: no cover

    @abstractmethod
    async def get_record(self, record_id: str) -> bool:
        """Return whether the page exists and is not archived."""

    async def list_record_ids(self, group_id: str) -> set[str] | None:
        """Ids of every live feature page related to *group_id*.

        Providers that cannot list in bulk return ``None`` and the engine
        falls back to one ``get_record`` call per feature.
        """
        return None

    @abstractmethod
    async def create_record(
        self, group_id: str, fields: FeatureFields, body: list[Block]
    ) -> str: ...  # pragma: no cover

    @abstractmethod
    async def update_record(self, record_id: str, group_id: str, fields: FeatureFields, body: list[Block]) -> None:
        """Patch properties and replace the page content wholesale.

        Raises ``NotFoundError`` for a stale id.
        """

    @abstractmethod
    async def archive_record(self, record_id: str) -> None:
        """Soft-delete a page. Already archived or missing pages are not an error."""
