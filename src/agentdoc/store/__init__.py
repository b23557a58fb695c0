"""Document store backends and the registry that names them."""
from __future__ import annotations

from agentdoc.store.base import DocumentStore
from agentdoc.store.filesystem import FileSystemStore
from agentdoc.store.memory import InMemoryStore
from agentdoc.store.registry import (
    StoreAlreadyRegisteredError,
    StoreNotFoundError,
    StoreRegistry,
)

store_registry = StoreRegistry()
store_registry.register_class("filesystem", FileSystemStore)
store_registry.register_class("memory", InMemoryStore)

__all__ = [
    "DocumentStore",
    "FileSystemStore",
    "InMemoryStore",
    "StoreRegistry",
    "StoreNotFoundError",
    "StoreAlreadyRegisteredError",
    "store_registry",
]
