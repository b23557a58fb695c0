"""Front-matter metadata splitting."""
from __future__ import annotations

from agentdoc.frontmatter.splitter import split_front_matter

__all__ = ["split_front_matter"]
