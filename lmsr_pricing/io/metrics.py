"""Metrics instrumentation for pricing evaluations."""

from __future__ import annotations

from typing import Any, Optional

try:  # pragma: no cover - optional dependency
    from prometheus_client import Counter as _PromCounter
except ImportError:  # pragma: no cover
    _PromCounter = None  # type: ignore

pricing_evaluations_total: Optional[Any]
if _PromCounter is not None:
    pricing_evaluations_total = _PromCounter(
        "pricing_evaluations_total", "LMSR pricing evaluations", ["fn"]
    )
else:
    pricing_evaluations_total = None


def inc_evaluations(fn: str, n: int = 1) -> None:
    if pricing_evaluations_total is not None:  # explicit None check avoids mypy truthiness warning
        pricing_evaluations_total.labels(fn=fn).inc(n)
