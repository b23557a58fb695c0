"""Registry of document store backends.

Backends are registered by name so that configuration files and the CLI
can pick one with a plain string.  Third-party packages contribute
backends by declaring entry-points in their own ``pyproject.toml`` under
the ``agentdoc.stores`` group.

Example
-------
Register a backend with the decorator::

    from agentdoc.store import DocumentStore, store_registry

    @store_registry.register("s3")
    class S3Store(DocumentStore):
        ...

Load installed backends via entry-points::

    store_registry.load_entrypoints()

Build an instance by name::

    store = store_registry.create("filesystem", encoding="latin-1")
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable
from typing import Any

from agentdoc.store.base import DocumentStore

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "agentdoc.stores"


class StoreNotFoundError(KeyError):
    """Raised when a requested backend name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.store_name = name
        self.available = available
        super().__init__(
            f"Document store {name!r} is not registered. "
            f"Available stores: {available}. "
            "Check that the package is installed and its entry-points are declared."
        )


class StoreAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str) -> None:
        self.store_name = name
        super().__init__(
            f"Document store {name!r} is already registered. "
            "Use a unique name or deregister the existing entry first."
        )


class StoreRegistry:
    """Name-to-class registry for ``DocumentStore`` implementations."""

    def __init__(self) -> None:
        self._stores: dict[str, type[DocumentStore]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[DocumentStore]], type[DocumentStore]]:
        """Return a class decorator that registers the decorated store.

        Raises
        ------
        StoreAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated class does not subclass ``DocumentStore``.
        """

        def decorator(cls: type[DocumentStore]) -> type[DocumentStore]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[DocumentStore]) -> None:
        """Register *cls* under *name* without decorator syntax."""
        if name in self._stores:
            raise StoreAlreadyRegisteredError(name)
        if not (isinstance(cls, type) and issubclass(cls, DocumentStore)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                "it must be a subclass of DocumentStore."
            )
        self._stores[name] = cls
        logger.debug("Registered document store %r -> %s", name, cls.__qualname__)

    def deregister(self, name: str) -> None:
        """Remove the backend registered under *name*."""
        if name not in self._stores:
            raise StoreNotFoundError(name, self.list_stores())
        del self._stores[name]
        logger.debug("Deregistered document store %r", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[DocumentStore]:
        """Return the class registered under *name*.

        Raises
        ------
        StoreNotFoundError
            If no backend is registered under *name*.
        """
        try:
            return self._stores[name]
        except KeyError:
            raise StoreNotFoundError(name, self.list_stores()) from None

    def create(self, name: str, **options: Any) -> DocumentStore:
        """Instantiate the backend registered under *name* with *options*."""
        return self.get(name)(**options)

    def list_stores(self) -> list[str]:
        """Return all registered backend names in alphabetical order."""
        return sorted(self._stores)

    def __contains__(self, name: object) -> bool:
        return name in self._stores

    def __len__(self) -> int:
        return len(self._stores)

    def __repr__(self) -> str:
        return f"StoreRegistry(stores={self.list_stores()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register backends declared as package entry-points.

        Names that are already registered are skipped, so repeated calls
        are idempotent.  A backend that fails to import is logged and
        skipped rather than aborting discovery of the others.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."agentdoc.stores"]
            s3 = "my_package.stores:S3Store"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._stores:
                logger.debug("Entry-point %r already registered; skipping.", ep.name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except (StoreAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered as a "
                    "document store; skipping.",
                    ep.name,
                )
