"""Tests for boardsync exception hierarchy."""

from __future__ import annotations

from boardsync.contracts.exceptions import (
    AuthenticationError,
    BoardSyncError,
    ConfigError,
    FeatureLoadError,
    NotFoundError,
    ProviderError,
    SyncError,
)


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    def test_all_exceptions_inherit_from_board_sync_error(self) -> None:
        for error_type in (ConfigError, FeatureLoadError, ProviderError, AuthenticationError, NotFoundError, SyncError):
            assert issubclass(error_type, BoardSyncError)

    def test_provider_error_subclasses(self) -> None:
        assert issubclass(AuthenticationError, ProviderError)
        assert issubclass(NotFoundError, ProviderError)


class TestProviderErrorPayload:
    def test_payload_defaults_to_empty_dict(self) -> None:
        exc = ProviderError("boom")
        assert str(exc) == "boom"
        assert exc.payload == {}

    def test_not_found_carries_page_id_and_payload(self) -> None:
        exc = NotFoundError("gone", page_id="p1", payload={"code": "object_not_found"})
        assert exc.page_id == "p1"
        assert exc.payload == {"code": "object_not_found"}
