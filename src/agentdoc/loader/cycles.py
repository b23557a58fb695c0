"""Cycle guard for recursive import expansion."""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from agentdoc.core.errors import CircularImportError


class VisitingStack:
    """Ordered set of the paths on the active resolution chain.

    One stack is created per top-level request.  Paths are pushed and
    popped in pairs by :meth:`enter`, so the stack is empty again once
    the request finishes, however it finishes.
    """

    def __init__(self) -> None:
        # dict keeps insertion order and gives O(1) membership
        self._paths: dict[str, None] = {}

    @contextmanager
    def enter(self, path: str) -> Iterator[None]:
        """Push *path* for the duration of the ``with`` block.

        Raises
        ------
        CircularImportError
            If *path* is already on the stack.
        """
        if path in self._paths:
            raise CircularImportError(self.cycle_chain(path))
        self._paths[path] = None
        try:
            yield
        finally:
            del self._paths[path]

    def cycle_chain(self, path: str) -> tuple[str, ...]:
        """Return the chain from the first occurrence of *path* back to it."""
        active = list(self._paths)
        start = active.index(path) if path in self._paths else len(active)
        return (*active[start:], path)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"VisitingStack({list(self._paths)})"
