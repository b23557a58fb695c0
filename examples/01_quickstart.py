#!/usr/bin/env python3
"""Example: Quickstart — agentdoc

Minimal working example: write two documents to a temporary directory,
load one that imports the other, and inspect metadata and body.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install agentdoc
"""
from __future__ import annotations

import tempfile
from pathlib import Path

import agentdoc
from agentdoc.loader import Loader

TRIAGE_MD = """\
---
name: triage
model: gpt-4o
tags: [support, routing]
---
# Triage Agent

@(./shared/tone)

Route every ticket to exactly one queue.
"""

TONE_MD = """\
---
name: tone
---
Be concise and friendly. Never promise refunds."""


def main() -> None:
    print(f"agentdoc version: {agentdoc.__version__}")

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "shared").mkdir()
        (root / "triage.md").write_text(TRIAGE_MD, encoding="utf-8")
        (root / "shared" / "tone.md").write_text(TONE_MD, encoding="utf-8")

        # Step 1: one-shot load
        doc = agentdoc.load(str(root), "triage")
        assert doc is not None
        print(f"Metadata: {doc.metadata}")
        print("Body:")
        print(doc.body)

        # Step 2: a long-lived loader caches every resolved document
        loader = Loader(str(root))
        first = loader.get_document("triage")
        second = loader.get_document("triage.md")
        print(f"Same instance from cache: {first is second}")

        # Step 3: failures come back as None (and a logged warning)
        missing = loader.get_document("does-not-exist")
        print(f"Missing document: {missing}")


if __name__ == "__main__":
    main()
