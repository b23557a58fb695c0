"""Turn logical names and import references into canonical paths.

Every path handed to the rest of the loader goes through
:class:`PathResolver`, which guarantees three things about it:

* it is absolute and normalized,
* it lies inside the sandbox root (no ``..`` escape),
* it names an existing regular file in the document store.

Names and references without a recognized extension get the default one
appended, so ``"greeting"`` and ``"greeting.md"`` resolve identically
while ``"aaa.xxx"`` resolves to ``aaa.xxx.md``.
"""
from __future__ import annotations

import os
from collections.abc import Iterable

from agentdoc.core.errors import EmptyImportPathError, NotFoundError, PathEscapeError
from agentdoc.store.base import DocumentStore

ROOT_MARKER = "/"


class PathResolver:
    """Resolve names within a sandbox root against a document store.

    Parameters
    ----------
    root:
        Sandbox root directory; made absolute on construction.
    store:
        Store consulted for existence checks.
    default_extension:
        Suffix appended when a path has none of *extensions*.
    extensions:
        Suffixes that already name a document.
    """

    def __init__(
        self,
        root: str,
        store: DocumentStore,
        default_extension: str = ".md",
        extensions: Iterable[str] = (".md",),
    ) -> None:
        self.root = os.path.abspath(root)
        self.store = store
        self.default_extension = default_extension
        self.extensions = tuple(extensions) or (default_extension,)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve_entry(self, name: str) -> str:
        """Resolve a top-level logical *name* relative to the root.

        Raises
        ------
        PathEscapeError
            If *name* points outside the root.
        NotFoundError
            If no regular file exists at the resolved path.
        """
        return self._finalize(os.path.join(self.root, name))

    def resolve_import(self, from_path: str, ref: str) -> str:
        """Resolve import reference *ref* found in the document *from_path*.

        References starting with ``/`` are relative to the root; all
        others are relative to the directory containing *from_path*.

        Raises
        ------
        EmptyImportPathError
            If *ref* is empty.
        PathEscapeError
            If the reference points outside the root.
        NotFoundError
            If no regular file exists at the resolved path.
        """
        if not ref:
            raise EmptyImportPathError(from_path)
        if ref.startswith(ROOT_MARKER):
            target = os.path.join(self.root, "." + ref)
        else:
            target = os.path.join(os.path.dirname(from_path), ref)
        return self._finalize(target)

    def is_within_root(self, path: str) -> bool:
        """Return True if *path* normalizes to a location inside the root."""
        try:
            relative = os.path.relpath(os.path.abspath(path), self.root)
        except ValueError:
            # different drive on Windows
            return False
        return relative != os.pardir and not relative.startswith(os.pardir + os.sep)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _finalize(self, target: str) -> str:
        path = os.path.normpath(os.path.abspath(target))
        if not path.endswith(self.extensions):
            path += self.default_extension
        if not self.is_within_root(path):
            raise PathEscapeError(path, self.root)
        if not (self.store.exists(path) and self._is_file(path)):
            raise NotFoundError(path)
        return path

    def _is_file(self, path: str) -> bool:
        try:
            return self.store.is_file(path)
        except OSError:
            return False
