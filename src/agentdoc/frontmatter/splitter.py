"""Split raw document text into front-matter metadata and a body.

A document may open with a YAML block fenced by delimiter lines::

    ---
    name: greeter
    tags: [demo]
    ---
    Body text starts here.

The block must start on the very first line.  The body is everything
after the closing delimiter line; only the newline that ends that line
is dropped, all other whitespace is kept.  Documents without a block
come back unchanged with empty metadata.
"""
from __future__ import annotations

import yaml

from agentdoc.config import DEFAULT_DELIMITER
from agentdoc.core.document import ParsedDocument
from agentdoc.core.errors import FrontMatterError

_BOM = "\ufeff"
_MERGE_TAG = "tag:yaml.org,2002:merge"


class _UniqueKeyLoader(yaml.SafeLoader):
    """``SafeLoader`` that rejects a key repeated within one mapping."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            if key_node.tag == _MERGE_TAG:
                continue
            key = self.construct_object(key_node, deep=deep)
            try:
                duplicate = key in seen
            except TypeError:
                # unhashable keys are reported by the base constructor
                continue
            if duplicate:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _is_delimiter(line: str, delimiter: str) -> bool:
    return line.rstrip() == delimiter


def _split_lines(source: str) -> list[str]:
    # Only "\n" ends a line; other Unicode line separators stay inside it.
    parts = source.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def split_front_matter(
    text: str, path: str | None = None, delimiter: str = DEFAULT_DELIMITER
) -> ParsedDocument:
    """Split *text* into a :class:`ParsedDocument`.

    Parameters
    ----------
    text:
        Complete raw document text.
    path:
        Where *text* came from; recorded on the result and in errors.
    delimiter:
        Marker line that opens and closes the metadata block.

    Returns
    -------
    ParsedDocument
        Metadata mapping (``{}`` when absent) and body.

    Raises
    ------
    FrontMatterError
        If the block is unterminated, is not valid YAML, repeats a key,
        or does not hold a mapping.
    """
    source = text[1:] if text.startswith(_BOM) else text
    lines = _split_lines(source)
    if not lines or not _is_delimiter(lines[0], delimiter):
        return ParsedDocument(metadata={}, body=text, path=path)

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index], delimiter):
            break
    else:
        raise FrontMatterError(f"no closing {delimiter!r} line", path)

    block = "".join(lines[1:index])
    body = "".join(lines[index + 1 :])
    return ParsedDocument(metadata=_load_metadata(block, path), body=body, path=path)


def _load_metadata(block: str, path: str | None) -> dict:
    try:
        data = yaml.load(block, Loader=_UniqueKeyLoader)
    except (yaml.YAMLError, ValueError) as exc:
        # PyYAML raises a bare ValueError for impossible dates like 2001-02-30
        raise FrontMatterError(f"invalid YAML ({exc})", path) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"expected a mapping, got {type(data).__name__}", path
        )
    return data
