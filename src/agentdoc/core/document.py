"""Document models produced by the splitter and the import expander.

A ``ParsedDocument`` is one file split into front-matter metadata and a
body.  A ``ResolvedDocument`` is the same document after every
``@(reference)`` directive in its body has been replaced by the body of
the referenced document.  Both are frozen dataclasses; the metadata
mapping is shared with the cache and must be treated as read-only.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass(frozen=True)
class ParsedDocument:
    """A document split into metadata and body.

    Parameters
    ----------
    metadata:
        Mapping parsed from the front-matter block, or ``{}`` when the
        document has no block.
    body:
        Text following the front-matter block, or the whole text.
    path:
        Canonical path the document was read from, if any.
    """

    metadata: dict[str, Any]
    body: str
    path: str | None = None


@dataclass(frozen=True)
class ResolvedDocument:
    """A document whose imports have been expanded recursively.

    Parameters
    ----------
    metadata:
        The originating document's metadata.  Imports never merge or
        alter metadata.
    body:
        Body text with every directive replaced by the imported body.
    path:
        Canonical path of the originating document.
    imports:
        Canonical paths imported directly by this document, in the order
        their directives appear.
    """

    metadata: dict[str, Any]
    body: str
    path: str | None = None
    imports: tuple[str, ...] = field(default=())

    @classmethod
    def from_parsed(
        cls, parsed: ParsedDocument, body: str, imports: tuple[str, ...] = ()
    ) -> "ResolvedDocument":
        """Build a resolved document from *parsed* with an expanded *body*."""
        return cls(metadata=parsed.metadata, body=body, path=parsed.path, imports=imports)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict suitable for JSON or YAML output."""
        return {
            "path": self.path,
            "metadata": self.metadata,
            "imports": list(self.imports),
            "body": self.body,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize the document to a JSON string.

        Non-JSON scalars that YAML produces (dates, timestamps) are
        rendered with ``str``.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False, default=str)

    def to_yaml(self) -> str:
        """Serialize the document to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(), default_flow_style=False, allow_unicode=True, sort_keys=False
        )
