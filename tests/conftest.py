"""Shared test fixtures for agentdoc.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from agentdoc.loader import Loader
from agentdoc.store import InMemoryStore

ROOT = "/r"


def make_store(files: dict[str, str], root: str = ROOT) -> InMemoryStore:
    """Return an in-memory store with *files* keyed relative to *root*."""
    return InMemoryStore({f"{root}/{name}": text for name, text in files.items()})


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "agentdoc"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def memory_loader() -> Callable[[dict[str, str]], Loader]:
    """Return a factory building a ``Loader`` over an in-memory store at ``/r``."""

    def _make(files: dict[str, str]) -> Loader:
        return Loader(ROOT, make_store(files))

    return _make


@pytest.fixture()
def docs_dir(tmp_path: Path) -> Path:
    """Return a temporary root directory holding a small document tree."""
    root = tmp_path / "docs"
    (root / "shared").mkdir(parents=True)
    (root / "triage.md").write_text(
        "---\nname: triage\nmodel: gpt-4o\n---\n# Triage\n@(./shared/tone)\nDone.\n",
        encoding="utf-8",
    )
    (root / "shared" / "tone.md").write_text(
        "---\nname: tone\n---\nBe kind.", encoding="utf-8"
    )
    return root
