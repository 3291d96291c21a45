"""LMSR (Logarithmic Market Scoring Rule) pricing for N outcomes.

Cost function: C(q) = b * log(sum_i exp(q_i / b))
Marginal price p_i = exp(q_i / b) / sum_j exp(q_j / b)

Evaluation follows IEEE-754 float64 rules: division by zero, ``log(0)`` and
``exp`` overflow produce NaN/Infinity instead of raising, so degenerate
inputs (``b == 0``, empty ``q``) come back as ordinary floats. The direct
formula is used unless ``stable=True`` is passed, which applies the max-shift
trick and changes overflow behaviour for extreme ``q / b``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from .base import PricingModel
from ..config import Settings, load_settings
from ..io.metrics import inc_evaluations

logger = logging.getLogger(__name__)


class OutcomeIndexError(IndexError):
    """Outcome index outside ``0 <= index < len(q)``."""


def _scaled(q: Sequence[float], b: float) -> np.ndarray:
    return np.asarray(q, dtype=np.float64) / np.float64(b)


def _sum_exp(scaled: np.ndarray, stable: bool) -> tuple[np.float64, np.float64]:
    """Return ``(shift, sum(exp(scaled - shift)))``.

    ``shift`` is zero for the direct formula, and for empty or non-finite
    input even when ``stable`` is requested.
    """
    shift = np.float64(0.0)
    if stable and scaled.size:
        m = scaled.max()
        if np.isfinite(m):
            shift = m
    return shift, np.exp(scaled - shift).sum()


def cost(q: Sequence[float], b: float, *, stable: bool = False) -> float:
    """Total market cost ``b * ln(sum(exp(q_i / b)))``.

    Empty ``q`` gives ``b * -inf``: ``-inf`` for positive ``b``, ``inf`` for
    negative ``b`` and NaN for ``b == 0``.
    """
    with np.errstate(all="ignore"):
        scaled = _scaled(q, b)
        shift, total = _sum_exp(scaled, stable)
        return float(np.float64(b) * (shift + np.log(total)))


def price(
    q: Sequence[float], b: float, outcome_index: int, *, stable: bool = False
) -> float:
    """Marginal price (implied probability) of one outcome.

    Raises ``OutcomeIndexError`` unless ``0 <= outcome_index < len(q)``.
    """
    n = len(q)
    if not 0 <= outcome_index < n:
        raise OutcomeIndexError(
            f"outcome_index {outcome_index} out of range for {n} outcomes"
        )
    with np.errstate(all="ignore"):
        scaled = _scaled(q, b)
        shift, total = _sum_exp(scaled, stable)
        return float(np.exp(scaled[outcome_index] - shift) / total)


def prices(q: Sequence[float], b: float, *, stable: bool = False) -> List[float]:
    """Prices for every outcome, in outcome order."""
    if not len(q):
        return []
    with np.errstate(all="ignore"):
        scaled = _scaled(q, b)
        shift, total = _sum_exp(scaled, stable)
        return [float(x) for x in np.exp(scaled - shift) / total]


def trade_cost(
    q: Sequence[float], delta: Sequence[float], b: float, *, stable: bool = False
) -> float:
    """Amount paid to move the market from ``q`` to ``q + delta``.

    Negative entries in ``delta`` are sales; the result is then negative.
    """
    if len(delta) != len(q):
        raise ValueError(
            f"delta has {len(delta)} entries, expected {len(q)} (one per outcome)"
        )
    with np.errstate(all="ignore"):
        after = np.asarray(q, dtype=np.float64) + np.asarray(delta, dtype=np.float64)
    return cost(after, b, stable=stable) - cost(q, b, stable=stable)


class LMSR(PricingModel):
    def __init__(self, b: float = 100.0, stable: bool = False):
        # b > 0 is assumed, not enforced
        self.b = b
        self.stable = stable
        logger.debug("LMSR model b=%s stable=%s", b, stable)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LMSR":
        s = settings or load_settings()
        return cls(b=s.liquidity, stable=s.stable)

    def prices(self, quantities: Sequence[float]) -> List[float]:
        inc_evaluations("prices")
        return prices(quantities, self.b, stable=self.stable)

    def price(self, quantities: Sequence[float], outcome_index: int) -> float:
        inc_evaluations("price")
        return price(quantities, self.b, outcome_index, stable=self.stable)

    def cost(self, quantities: Sequence[float]) -> float:
        inc_evaluations("cost")
        return cost(quantities, self.b, stable=self.stable)

    def trade_cost(self, quantities: Sequence[float], delta: Sequence[float]) -> float:
        inc_evaluations("trade_cost")
        paid = trade_cost(quantities, delta, self.b, stable=self.stable)
        logger.debug("trade_cost q=%s delta=%s -> %s", list(quantities), list(delta), paid)
        return paid

    def price_binary(self, q_yes: float, q_no: float) -> float:
        p_yes, _ = self.prices([q_yes, q_no])
        return p_yes

    def max_loss(self, n_outcomes: int) -> float:
        """Worst-case subsidy for the market maker: ``b * ln(n)``."""
        return self.cost([0.0] * n_outcomes)
