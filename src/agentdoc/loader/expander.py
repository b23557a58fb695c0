"""Recursive expansion of ``@(reference)`` import directives.

A directive is ``@(`` followed by one or more characters other than
``)`` and a closing ``)``.  The reference is trimmed and resolved
relative to the importing document (or to the root when it starts with
``/``), and the whole directive is replaced by the imported document's
*body*.  The imported document's metadata never reaches the importer.

References cannot contain ``)``: the first ``)`` always closes the
directive, so ``@(notes(v2))`` imports ``notes(v2`` and leaves a stray
``)`` in the body.
"""
from __future__ import annotations

import logging
import re

from agentdoc.config import DEFAULT_DELIMITER
from agentdoc.core.document import ParsedDocument, ResolvedDocument
from agentdoc.core.errors import ImportDepthError, NotFoundError
from agentdoc.frontmatter.splitter import split_front_matter
from agentdoc.loader.cache import ResolutionCache
from agentdoc.loader.cycles import VisitingStack
from agentdoc.resolver.paths import PathResolver
from agentdoc.store.base import DocumentStore

logger = logging.getLogger(__name__)

IMPORT_PATTERN = re.compile(r"@\(([^)]+)\)")


def find_imports(body: str) -> list[str]:
    """Return the trimmed references of every directive in *body*, in order."""
    return [match.group(1).strip() for match in IMPORT_PATTERN.finditer(body)]


class ImportExpander:
    """Resolve canonical paths into fully expanded documents.

    Parameters
    ----------
    resolver:
        Turns import references into canonical paths.
    store:
        Supplies raw document text.
    cache:
        Memo shared by every request made through the owning loader.
    delimiter:
        Front-matter delimiter passed to the splitter.
    """

    def __init__(
        self,
        resolver: PathResolver,
        store: DocumentStore,
        cache: ResolutionCache,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> None:
        self.resolver = resolver
        self.store = store
        self.cache = cache
        self.delimiter = delimiter

    def resolve(self, path: str, visiting: VisitingStack) -> ResolvedDocument:
        """Return the expanded document at canonical *path*.

        Cached documents are returned as-is without touching the store.
        Otherwise the document is read, split, and each directive is
        expanded left to right with the same *visiting* stack, so a
        reference back to any document still being resolved fails.

        Raises
        ------
        CircularImportError
            If *path* is already on *visiting*.
        ImportDepthError
            If an acyclic chain of imports exhausts the interpreter stack.
        ResolutionError
            Any failure from resolving, reading or splitting *path* or
            one of its transitive imports, unmodified.
        """
        cached = self.cache.get(path)
        if cached is not None:
            return cached

        try:
            with visiting.enter(path):
                parsed = self._read(path)
                imports: list[str] = []

                def substitute(match: re.Match[str]) -> str:
                    target = self.resolver.resolve_import(path, match.group(1).strip())
                    imports.append(target)
                    logger.debug("Expanding import %s -> %s", path, target)
                    return self.resolve(target, visiting).body

                body = IMPORT_PATTERN.sub(substitute, parsed.body)
        except RecursionError as exc:
            # Raised again by each frame too close to the limit to build
            # the error; the first frame with room converts it.
            raise ImportDepthError(path) from exc

        document = ResolvedDocument.from_parsed(parsed, body, tuple(imports))
        return self.cache.store(path, document)

    def _read(self, path: str) -> ParsedDocument:
        try:
            text = self.store.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise NotFoundError(path, reason=str(exc)) from exc
        return split_front_matter(text, path=path, delimiter=self.delimiter)
