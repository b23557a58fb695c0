"""agentdoc — load Markdown documents with YAML front matter and ``@(...)`` imports.

Public API
----------
The stable public surface is everything exported from this module plus
:class:`agentdoc.loader.Loader`.  Anything inside submodules not
re-exported here is considered private and may change without notice.

Example
-------
::

    import agentdoc

    # One-shot load of prompts/triage.md, expanding its imports
    doc = agentdoc.load("prompts", "triage")
    doc.metadata   # {'name': 'triage', 'model': 'gpt-4o'}
    doc.body       # body with every @(./shared/tone) spliced in

    # Split a string without touching the filesystem
    parsed = agentdoc.split("---\\nname: demo\\n---\\nHello")

    # Reuse one loader to share its cache across requests
    from agentdoc.loader import Loader
    loader = Loader("prompts")
    loader.get_document("triage") is loader.get_document("triage")  # True

    agentdoc.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from agentdoc.core.document import ParsedDocument, ResolvedDocument
    from agentdoc.store.base import DocumentStore


def load(
    root: str, name: str, store: "DocumentStore | None" = None
) -> "ResolvedDocument | None":
    """Load document *name* from *root* with a throwaway loader.

    Parameters
    ----------
    root:
        Sandbox root directory.
    name:
        Logical document name, with or without the ``.md`` extension.
    store:
        Optional document store; defaults to the local filesystem.

    Returns
    -------
    ResolvedDocument | None
        The expanded document, or ``None`` if it could not be resolved
        (the reason is logged as a warning).
    """
    from agentdoc.loader.loader import Loader

    return Loader(root, store).get_document(name)


def split(text: str) -> "ParsedDocument":
    """Split *text* into front-matter metadata and body.

    Raises
    ------
    agentdoc.core.errors.FrontMatterError
        If the front-matter block is malformed.
    """
    from agentdoc.frontmatter.splitter import split_front_matter

    return split_front_matter(text)


__all__ = [
    "__version__",
    "load",
    "split",
]
