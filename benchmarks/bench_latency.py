"""Benchmark: document resolution latency (p50/p95/mean).

Measures per-call latency for resolving a document that imports a chain
of other documents, both cold (fresh loader, empty cache) and warm
(cache hit on a long-lived loader).
"""
from __future__ import annotations

import json
import sys
import time
from collections.abc import Callable
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from agentdoc.loader import Loader
from agentdoc.store import InMemoryStore

_WARMUP: int = 100
_ITERATIONS: int = 3_000
_CHAIN_LENGTH: int = 10
_ROOT = "/bench"


def _chain_store(length: int = _CHAIN_LENGTH) -> InMemoryStore:
    """Return a store where doc0 imports doc1, which imports doc2, ..."""
    files: dict[str, str] = {}
    for i in range(length):
        tail = f"@(./doc{i + 1})" if i + 1 < length else "end"
        files[f"{_ROOT}/doc{i}.md"] = (
            f"---\nname: doc{i}\ntags: [bench]\n---\nSection {i}\n{tail}\n"
        )
    return InMemoryStore(files)


def _measure(operation: str, call: Callable[[], object]) -> dict[str, object]:
    for _ in range(_WARMUP):
        call()

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        call()
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": operation,
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1) if total else 0.0,
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def bench_cold_resolve_latency() -> dict[str, object]:
    """Benchmark resolving an import chain with a fresh loader per call."""
    store = _chain_store()
    return _measure(
        "agentdoc_resolve_cold_chain",
        lambda: Loader(_ROOT, store).get_document("doc0"),
    )


def bench_cached_resolve_latency() -> dict[str, object]:
    """Benchmark repeated lookups served from one loader's cache."""
    loader = Loader(_ROOT, _chain_store())
    loader.get_document("doc0")
    return _measure(
        "agentdoc_resolve_cached",
        lambda: loader.get_document("doc0"),
    )


if __name__ == "__main__":
    results = [bench_cold_resolve_latency(), bench_cached_resolve_latency()]
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)
    print(f"Results saved to {output_path}")
