"""Per-loader memo of fully resolved documents."""
from __future__ import annotations

import logging
from collections.abc import Iterator

from agentdoc.core.document import ResolvedDocument

logger = logging.getLogger(__name__)


class ResolutionCache:
    """Map canonical paths to their ``ResolvedDocument``.

    Entries are added lazily and never evicted.  Insertion is idempotent:
    storing a path that is already present keeps the existing document
    and returns it, so every caller ends up holding the same instance.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ResolvedDocument] = {}

    def get(self, path: str) -> ResolvedDocument | None:
        """Return the cached document for *path*, or ``None``."""
        document = self._entries.get(path)
        if document is not None:
            logger.debug("Cache hit for %s", path)
        return document

    def store(self, path: str, document: ResolvedDocument) -> ResolvedDocument:
        """Cache *document* under *path* unless one is already cached.

        Returns
        -------
        ResolvedDocument
            The instance held by the cache after the call.
        """
        return self._entries.setdefault(path, document)

    def paths(self) -> list[str]:
        """Return every cached path in insertion order."""
        return list(self._entries)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
