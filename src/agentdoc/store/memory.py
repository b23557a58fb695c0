"""In-memory store backed by a mapping of path to text.

Useful for embedding documents shipped inside an application and for
tests that must observe how often the loader reads each path.

Usage
-----
::

    from agentdoc.store import InMemoryStore

    store = InMemoryStore({
        "/workspace/a.md": "---\\nname: a\\n---\\nHead @(./b) Tail",
        "/workspace/b.md": "Middle",
    })
"""
from __future__ import annotations

import os
from collections import Counter
from collections.abc import Mapping

from agentdoc.store.base import DocumentStore


class InMemoryStore(DocumentStore):
    """Serve documents from a ``{path: text}`` mapping.

    Keys are normalized with ``os.path.normpath``.  Every ancestor
    directory of a key also "exists", but only keys are regular files.

    Parameters
    ----------
    files:
        Mapping of absolute path to document text.
    """

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self._files: dict[str, str] = {}
        self._dirs: set[str] = set()
        self._reads: Counter[str] = Counter()
        for path, text in (files or {}).items():
            self.add(path, text)

    def add(self, path: str, text: str) -> None:
        """Add or replace the document at *path*."""
        normalized = os.path.normpath(path)
        self._files[normalized] = text
        parent = os.path.dirname(normalized)
        while parent and parent not in self._dirs:
            self._dirs.add(parent)
            next_parent = os.path.dirname(parent)
            if next_parent == parent:
                break
            parent = next_parent

    def exists(self, path: str) -> bool:
        normalized = os.path.normpath(path)
        return normalized in self._files or normalized in self._dirs

    def is_file(self, path: str) -> bool:
        return os.path.normpath(path) in self._files

    def read_text(self, path: str) -> str:
        normalized = os.path.normpath(path)
        try:
            text = self._files[normalized]
        except KeyError:
            raise FileNotFoundError(f"No such document: {path}") from None
        self._reads[normalized] += 1
        return text

    def read_count(self, path: str) -> int:
        """Return how many times *path* has been read."""
        return self._reads[os.path.normpath(path)]

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"InMemoryStore(files={sorted(self._files)})"
