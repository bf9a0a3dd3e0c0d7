"""Notion provider adapter."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from boardsync.contracts.config import NOTION_API_VERSION
from boardsync.contracts.exceptions import AuthenticationError, NotFoundError, ProviderError
from boardsync.contracts.feature import FeatureFields
from boardsync.contracts.provider import Provider
from boardsync.contracts.renderer import Block
from boardsync.providers.notion._retrying_transport import RetryingTransport
from boardsync.providers.notion.mapper import (
    chunked,
    feature_filter,
    feature_properties,
    is_archived_error,
    is_live_page,
    project_properties,
    relation_filter,
    title_filter,
)

_LOG = logging.getLogger(__name__)

NOTION_API_URL = "https://api.notion.com/v1"
_MAX_PAGES = 100


class NotionProvider(Provider):
    """Projects/Features databases backed by the Notion REST API."""

    def __init__(
        self,
        *,
        token: str,
        projects_db_id: str,
        features_db_id: str,
        notion_version: str = NOTION_API_VERSION,
        base_url: str = NOTION_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
    ) -> None:
        self._token = token
        self._projects_db_id = projects_db_id
        self._features_db_id = features_db_id
        self._notion_version = notion_version
        self._base_url = base_url
        self._transport = transport
        self._max_retries = max_retries
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> NotionProvider:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Notion-Version": self._notion_version,
                "Content-Type": "application/json",
            },
            transport=RetryingTransport(transport=self._transport, max_retries=self._max_retries),
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            timeout=httpx.Timeout(30.0),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------
    # Projects database
    # ------------------------------------------------------------------

    async def find_group_by_name(self, name: str) -> str | None:
        results = await self._query(self._projects_db_id, title_filter(name), page_size=1, max_pages=1)
        return results[0]["id"] if results else None

    async def create_group(self, name: str, children: list[Block]) -> str:
        return await self._create_page(self._projects_db_id, project_properties(name), children)

    async def update_group(self, group_id: str, name: str) -> None:
        await self._update_page(group_id, {"properties": project_properties(name)})

    # ------------------------------------------------------------------
    # Features database
    # ------------------------------------------------------------------

    async def find_record_by_title_and_group(self, title: str, group_id: str) -> str | None:
        results = await self._query(self._features_db_id, feature_filter(title, group_id), page_size=1, max_pages=1)
        return results[0]["id"] if results else None

    async def get_record(self, record_id: str) -> bool:
        try:
            page = await self._request("GET", f"/pages/{record_id}")
        except NotFoundError:
            return False
        return is_live_page(page)

    async def list_record_ids(self, group_id: str) -> set[str] | None:
        results = await self._query(self._features_db_id, relation_filter(group_id))
        return {page["id"] for page in results if is_live_page(page)}

    async def create_record(self, group_id: str, fields: FeatureFields, body: list[Block]) -> str:
        return await self._create_page(self._features_db_id, feature_properties(fields, group_id), body)

    async def update_record(self, record_id: str, group_id: str, fields: FeatureFields, body: list[Block]) -> None:
        await self._update_page(record_id, {"properties": feature_properties(fields, group_id)})
        await self._replace_children(record_id, body)

    async def archive_record(self, record_id: str) -> None:
        try:
            await self._update_page(record_id, {"archived": True})
        except NotFoundError:
            _LOG.debug("Page %s already gone; nothing to archive", record_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _create_page(self, database_id: str, properties: dict[str, Any], children: list[Block]) -> str:
        batches = list(chunked(children))
        payload: dict[str, Any] = {"parent": {"database_id": database_id}, "properties": properties}
        if batches:
            payload["children"] = batches[0]
        page = await self._request("POST", "/pages", json=payload)
        page_id = page.get("id")
        if not isinstance(page_id, str):
            raise ProviderError("Notion create page response missing id")
        for batch in batches[1:]:
            await self._request("PATCH", f"/blocks/{page_id}/children", json={"children": batch})
        return page_id

    async def _update_page(self, page_id: str, payload: dict[str, Any]) -> None:
        try:
            await self._request("PATCH", f"/pages/{page_id}", json=payload)
        except NotFoundError:
            raise
        except ProviderError as exc:
            if is_archived_error(exc.payload):
                if payload.get("archived") is True:
                    return
                raise NotFoundError(f"Notion page is archived: {page_id}", page_id=page_id) from exc
            raise

    async def _replace_children(self, page_id: str, children: list[Block]) -> None:
        for block_id in await self._list_children(page_id):
            try:
                await self._request("DELETE", f"/blocks/{block_id}")
            except ProviderError as exc:
                _LOG.debug("Could not delete block %s: %s", block_id, exc)
        for batch in chunked(children):
            await self._request("PATCH", f"/blocks/{page_id}/children", json={"children": batch})

    async def _list_children(self, page_id: str) -> list[str]:
        block_ids: list[str] = []
        cursor: str | None = None
        for _ in range(_MAX_PAGES):
            params: dict[str, Any] = {"page_size": 100}
            if cursor:
                params["start_cursor"] = cursor
            data = await self._request("GET", f"/blocks/{page_id}/children", params=params)
            block_ids.extend(block["id"] for block in data.get("results", []))
            if not data.get("has_more"):
                return block_ids
            cursor = data.get("next_cursor")
        raise ProviderError("Block listing exceeded pagination safety budget.")

    async def _query(
        self,
        database_id: str,
        filter_: dict[str, Any],
        *,
        page_size: int = 100,
        max_pages: int = _MAX_PAGES,
    ) -> list[dict[str, Any]]:
        results: list[dict[str, Any]] = []
        cursor: str | None = None
        for _ in range(max_pages):
            payload: dict[str, Any] = {"filter": filter_, "page_size": page_size}
            if cursor:
                payload["start_cursor"] = cursor
            data = await self._request("POST", f"/databases/{database_id}/query", json=payload)
            results.extend(data.get("results", []))
            if not data.get("has_more"):
                return results
            cursor = data.get("next_cursor")
        if max_pages < _MAX_PAGES:
            return results
        raise ProviderError("Database query exceeded pagination safety budget.")

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        if self._client is None:
            raise ProviderError("Provider is not initialized. Use 'async with'.")
        try:
            response = await self._client.request(method, path, json=json, params=params)
        except httpx.HTTPError as exc:
            raise ProviderError(f"Notion request failed: {method} {path}: {exc}") from exc

        if response.is_success:
            data = response.json()
            if not isinstance(data, dict):
                raise ProviderError(f"Unexpected Notion response shape for {method} {path}")
            return data

        raise self._error_from_response(response, method, path)

    @staticmethod
    def _error_from_response(response: httpx.Response, method: str, path: str) -> ProviderError:
        try:
            payload: Any = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        message = payload.get("message") or response.reason_phrase
        detail = f"Notion API {response.status_code} on {method} {path}: {message}"

        if response.status_code == 404:
            return NotFoundError(detail, payload=payload)
        if response.status_code in {401, 403}:
            return AuthenticationError(detail, payload=payload)
        return ProviderError(detail, payload=payload)
