"""Document loading: import expansion, cycle detection and caching."""
from __future__ import annotations

from agentdoc.loader.cache import ResolutionCache
from agentdoc.loader.cycles import VisitingStack
from agentdoc.loader.expander import IMPORT_PATTERN, ImportExpander, find_imports
from agentdoc.loader.loader import Loader

__all__ = [
    "Loader",
    "ImportExpander",
    "ResolutionCache",
    "VisitingStack",
    "IMPORT_PATTERN",
    "find_imports",
]
