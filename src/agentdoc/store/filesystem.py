"""Default store reading documents from the local filesystem."""
from __future__ import annotations

import logging
import os

from agentdoc.store.base import DocumentStore

logger = logging.getLogger(__name__)


class FileSystemStore(DocumentStore):
    """Read documents with the built-in ``open``.

    Parameters
    ----------
    encoding:
        Text encoding used for every read (default ``"utf-8"``).
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        # os.path.isfile already maps stat failures to False
        return os.path.isfile(path)

    def read_text(self, path: str) -> str:
        logger.debug("Reading %s", path)
        with open(path, encoding=self.encoding) as fh:
            return fh.read()

    def __repr__(self) -> str:
        return f"FileSystemStore(encoding={self.encoding!r})"
