"""CLI package.

The ``cli`` sub-package contains the Click application.  Commands are
thin wrappers over :class:`agentdoc.loader.Loader`; no resolution logic
lives here.
"""
from __future__ import annotations
