"""Abstract document store interface.

A store is the only component that touches document bytes.  The loader
asks it three questions about a canonical path: does it exist, is it a
regular file, and what is its text.  Implementations may be backed by a
filesystem, an in-memory mapping, a package's resources or anything else
that can answer those questions synchronously.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class DocumentStore(ABC):
    """Source of raw document text, addressed by canonical path."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if *path* names an existing entry."""

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Return True if *path* is a regular file.

        Must return ``False`` rather than raise for a missing path or an
        entry that cannot be inspected (e.g. a broken symlink).
        """

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the full text of *path*.

        Raises
        ------
        OSError
            If the document cannot be read.
        """
