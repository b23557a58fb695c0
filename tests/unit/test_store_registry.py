"""Unit tests for agentdoc.store.registry — StoreRegistry, error types,
entry-point loading, and the default registry.
"""
from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from agentdoc.store import (
    DocumentStore,
    FileSystemStore,
    InMemoryStore,
    StoreAlreadyRegisteredError,
    StoreNotFoundError,
    StoreRegistry,
    store_registry,
)

ENTRY_POINTS = "agentdoc.store.registry.importlib.metadata.entry_points"


class DictStore(InMemoryStore):
    """Trivial subclass used as a third-party backend."""


class NotAStore:
    """Does NOT subclass DocumentStore — used for error path testing."""


# ===========================================================================
# Error types
# ===========================================================================


class TestErrors:
    def test_not_found_is_key_error(self) -> None:
        error = StoreNotFoundError("s3", ["filesystem"])
        assert isinstance(error, KeyError)
        assert error.store_name == "s3"
        assert error.available == ["filesystem"]
        assert "s3" in str(error)

    def test_already_registered_is_value_error(self) -> None:
        error = StoreAlreadyRegisteredError("memory")
        assert isinstance(error, ValueError)
        assert error.store_name == "memory"


# ===========================================================================
# Registration and lookup
# ===========================================================================


class TestRegistration:
    def test_decorator_registers_and_returns_class(self) -> None:
        registry = StoreRegistry()

        @registry.register("dict")
        class Local(InMemoryStore):
            pass

        assert registry.get("dict") is Local

    def test_duplicate_raises(self) -> None:
        registry = StoreRegistry()
        registry.register_class("dict", DictStore)
        with pytest.raises(StoreAlreadyRegisteredError):
            registry.register_class("dict", DictStore)

    def test_non_store_raises_type_error(self) -> None:
        with pytest.raises(TypeError, match="DocumentStore"):
            StoreRegistry().register_class("bad", NotAStore)  # type: ignore[arg-type]

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(StoreNotFoundError):
            StoreRegistry().get("ghost")

    def test_deregister(self) -> None:
        registry = StoreRegistry()
        registry.register_class("dict", DictStore)
        registry.deregister("dict")
        assert "dict" not in registry

    def test_deregister_unknown_raises(self) -> None:
        with pytest.raises(StoreNotFoundError):
            StoreRegistry().deregister("ghost")

    def test_create_passes_options(self) -> None:
        registry = StoreRegistry()
        registry.register_class("fs", FileSystemStore)
        store = registry.create("fs", encoding="latin-1")
        assert isinstance(store, FileSystemStore)
        assert store.encoding == "latin-1"

    def test_list_and_len(self) -> None:
        registry = StoreRegistry()
        registry.register_class("b", DictStore)
        registry.register_class("a", InMemoryStore)
        assert registry.list_stores() == ["a", "b"]
        assert len(registry) == 2
        assert "'a', 'b'" in repr(registry)

    def test_logs_registration(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="agentdoc.store.registry"):
            StoreRegistry().register_class("logged-store", DictStore)
        assert "logged-store" in caplog.text


class TestDefaultRegistry:
    def test_builtins_registered(self) -> None:
        assert store_registry.get("filesystem") is FileSystemStore
        assert store_registry.get("memory") is InMemoryStore

    def test_all_builtins_are_stores(self) -> None:
        for name in store_registry.list_stores():
            assert issubclass(store_registry.get(name), DocumentStore)


# ===========================================================================
# load_entrypoints
# ===========================================================================


class TestLoadEntrypoints:
    def test_empty_group_does_nothing(self) -> None:
        registry = StoreRegistry()
        with patch(ENTRY_POINTS, return_value=[]):
            registry.load_entrypoints()
        assert len(registry) == 0

    def test_registers_valid_store(self) -> None:
        registry = StoreRegistry()
        mock_ep = MagicMock()
        mock_ep.name = "dict"
        mock_ep.load.return_value = DictStore

        with patch(ENTRY_POINTS, return_value=[mock_ep]) as entry_points:
            registry.load_entrypoints()

        entry_points.assert_called_once_with(group="agentdoc.stores")
        assert registry.get("dict") is DictStore

    def test_skips_already_registered(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = StoreRegistry()
        registry.register_class("dict", DictStore)
        mock_ep = MagicMock()
        mock_ep.name = "dict"

        with patch(ENTRY_POINTS, return_value=[mock_ep]):
            with caplog.at_level(logging.DEBUG, logger="agentdoc.store.registry"):
                registry.load_entrypoints()

        mock_ep.load.assert_not_called()
        assert len(registry) == 1

    def test_load_exception_skipped(self) -> None:
        registry = StoreRegistry()
        mock_ep = MagicMock()
        mock_ep.name = "broken"
        mock_ep.load.side_effect = ImportError("no module named broken_store")

        with patch(ENTRY_POINTS, return_value=[mock_ep]):
            registry.load_entrypoints()

        assert len(registry) == 0

    def test_wrong_type_skipped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = StoreRegistry()
        mock_ep = MagicMock()
        mock_ep.name = "not-a-store"
        mock_ep.load.return_value = NotAStore

        with patch(ENTRY_POINTS, return_value=[mock_ep]):
            with caplog.at_level(logging.WARNING, logger="agentdoc.store.registry"):
                registry.load_entrypoints()

        assert len(registry) == 0
        assert "not-a-store" in caplog.text

    def test_idempotent(self) -> None:
        registry = StoreRegistry()
        mock_ep = MagicMock()
        mock_ep.name = "dict"
        mock_ep.load.return_value = DictStore

        with patch(ENTRY_POINTS, return_value=[mock_ep]):
            registry.load_entrypoints()
            registry.load_entrypoints()

        assert len(registry) == 1
