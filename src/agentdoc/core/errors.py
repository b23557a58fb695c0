"""Error types raised while resolving documents.

Every failure raised during resolution derives from ``ResolutionError``
and carries the path that caused it, so that the loader boundary can log
an actionable message without inspecting the specific subclass.
"""
from __future__ import annotations

from collections.abc import Sequence


class ResolutionError(Exception):
    """Base class for all document-resolution failures.

    Parameters
    ----------
    message:
        Human-readable description of the failure.
    path:
        The logical name, import reference or canonical path involved.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class NotFoundError(ResolutionError):
    """Raised when a resolved path does not exist or is not a regular file.

    Also raised, with a *reason*, when the store reports a path as a file
    but then fails to read it.
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.reason = reason
        suffix = f" ({reason})" if reason else ""
        super().__init__(f"Document not found: {path}{suffix}", path)


class PathEscapeError(ResolutionError):
    """Raised when a path would resolve outside the sandbox root."""

    def __init__(self, path: str, root: str) -> None:
        self.root = root
        super().__init__(f"Path escapes root directory {root!r}: {path}", path)


class EmptyImportPathError(ResolutionError):
    """Raised when an ``@(...)`` directive holds only whitespace."""

    def __init__(self, from_path: str | None = None) -> None:
        location = f" in {from_path}" if from_path else ""
        super().__init__(f"Import path cannot be empty{location}", from_path)


class FrontMatterError(ResolutionError):
    """Raised when a document's front-matter block is malformed.

    Parameters
    ----------
    reason:
        What is wrong with the block (unterminated, invalid YAML, ...).
    path:
        The document the block was read from, when known.
    """

    def __init__(self, reason: str, path: str | None = None) -> None:
        self.reason = reason
        where = path if path is not None else "<string>"
        super().__init__(f"Malformed front matter in {where}: {reason}", path)


class CircularImportError(ResolutionError):
    """Raised when a document is imported while it is still being resolved.

    Parameters
    ----------
    chain:
        The import chain from the first occurrence of the repeated path
        through the repeated path again, in traversal order.
    """

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain: tuple[str, ...] = tuple(chain)
        super().__init__(
            f"Circular import detected: {' -> '.join(self.chain)}",
            self.chain[-1] if self.chain else None,
        )


class ImportDepthError(ResolutionError):
    """Raised when an acyclic import chain nests too deeply to expand.

    *path* is the document that was being resolved when the interpreter
    ran out of stack.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Import chain too deep at {path}", path)


class ConfigError(ValueError):
    """Raised when a ``LoaderConfig`` cannot be built from its source."""
