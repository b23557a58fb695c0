"""Path resolution with sandboxing."""
from __future__ import annotations

from agentdoc.resolver.paths import PathResolver

__all__ = ["PathResolver"]
