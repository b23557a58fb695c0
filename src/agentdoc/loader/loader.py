"""Loader — the public entry point for resolving documents.

Usage
-----
::

    from agentdoc.loader import Loader

    loader = Loader("prompts")
    doc = loader.get_document("support/triage")
    if doc is not None:
        print(doc.metadata["name"])
        print(doc.body)

``get_document`` never raises for a resolution failure: it logs a
warning and returns ``None``.  Use :meth:`Loader.resolve` to get the
exception instead.
"""
from __future__ import annotations

import logging
from dataclasses import replace

from agentdoc.config import LoaderConfig
from agentdoc.core.document import ResolvedDocument
from agentdoc.core.errors import ResolutionError
from agentdoc.loader.cache import ResolutionCache
from agentdoc.loader.cycles import VisitingStack
from agentdoc.loader.expander import ImportExpander
from agentdoc.resolver.paths import PathResolver
from agentdoc.store.base import DocumentStore

logger = logging.getLogger(__name__)


class Loader:
    """Load documents by logical name from a sandboxed root.

    Each loader owns one resolution cache; a document is read and
    expanded at most once per loader, and repeated requests return the
    same ``ResolvedDocument`` instance.

    Parameters
    ----------
    root:
        Sandbox root directory.  Overrides ``config.root`` when both are
        given.
    store:
        Document store to read from.  When omitted, the backend named by
        ``config.store`` is built from the store registry.
    config:
        Full loader configuration.  Defaults to ``LoaderConfig(root=root)``.
    """

    def __init__(
        self,
        root: str | None = None,
        store: DocumentStore | None = None,
        *,
        config: LoaderConfig | None = None,
    ) -> None:
        if config is None:
            config = LoaderConfig(root=root if root is not None else ".")
        elif root is not None:
            config = replace(config, root=root)
        self.config = config
        self.store = store if store is not None else self._build_store(config)
        self.resolver = PathResolver(
            config.root,
            self.store,
            default_extension=config.default_extension,
            extensions=config.extensions,
        )
        self.cache = ResolutionCache()
        self._expander = ImportExpander(
            self.resolver, self.store, self.cache, delimiter=config.delimiter
        )

    @classmethod
    def from_config(cls, config: LoaderConfig) -> "Loader":
        """Build a loader, and its store, entirely from *config*."""
        return cls(config=config)

    @staticmethod
    def _build_store(config: LoaderConfig) -> DocumentStore:
        from agentdoc.store import store_registry

        options = dict(config.store_options)
        if config.store == "filesystem":
            options.setdefault("encoding", config.encoding)
        return store_registry.create(config.store, **options)

    @property
    def root(self) -> str:
        """Absolute sandbox root."""
        return self.resolver.root

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, name: str) -> ResolvedDocument:
        """Resolve *name* and expand its imports.

        Raises
        ------
        ResolutionError
            Whatever went wrong: ``NotFoundError``, ``PathEscapeError``,
            ``EmptyImportPathError``, ``FrontMatterError``,
            ``CircularImportError`` or ``ImportDepthError``.
        """
        path = self.resolver.resolve_entry(name)
        return self._expander.resolve(path, VisitingStack())

    def get_document(self, name: str) -> ResolvedDocument | None:
        """Return the resolved document for *name*, or ``None`` on failure.

        Every ``ResolutionError`` is logged as a warning and swallowed
        here; callers only ever see a complete document or ``None``.
        """
        try:
            return self.resolve(name)
        except ResolutionError as exc:
            logger.warning(
                "Failed to load document %r (at %s): %s", name, exc.path, exc
            )
            return None

    def clear_cache(self) -> None:
        """Forget every resolved document so the next request re-reads."""
        self.cache.clear()

    def __repr__(self) -> str:
        return f"Loader(root={self.root!r}, store={self.store!r}, cached={len(self.cache)})"
