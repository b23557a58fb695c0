"""Core domain models and error types.

Submodules in core/ should not import from store/, loader/ or cli/.
"""
from __future__ import annotations

from agentdoc.core.document import ParsedDocument, ResolvedDocument
from agentdoc.core.errors import (
    CircularImportError,
    ConfigError,
    EmptyImportPathError,
    FrontMatterError,
    ImportDepthError,
    NotFoundError,
    PathEscapeError,
    ResolutionError,
)

__all__ = [
    "ParsedDocument",
    "ResolvedDocument",
    "ResolutionError",
    "NotFoundError",
    "PathEscapeError",
    "EmptyImportPathError",
    "FrontMatterError",
    "CircularImportError",
    "ImportDepthError",
    "ConfigError",
]
