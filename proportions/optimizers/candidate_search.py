"""Brute-force search over nearby investment totals.

For a maximum investment M, every whole-dollar total t in

    [round(0.9 * M), M]

is tried. Each t yields one candidate with

    q[i] = round(w[i] * t / p[i])

shares of ticker i, scored by the L1 deviation

    sum(|w[i] - q[i] * p[i] / sum(q[j] * p[j])|)

The lowest score wins; on ties the smallest total is kept. Candidates are
scored CHUNK_SIZE rows at a time so memory does not grow with M.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterator, Mapping, Optional

import numpy as np

from ..models import Portfolio, PortfolioDistribution
from .base import (
    AllocationStrategy,
    build_portfolio,
    collect_arrays,
    deviations,
    quantities_for_totals,
)

logger = logging.getLogger(__name__)

CHUNK_SIZE = 100_000


def candidate_bounds(
    max_investment: Decimal,
    lower_bound_ratio: Decimal = Decimal("0.9"),
    step: int = 1,
) -> tuple[Decimal, int]:
    """Lowest candidate total and how many candidates follow it. Count is never zero."""
    try:
        lower = (max_investment * lower_bound_ratio).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Investment {max_investment} is too large to search") from e

    if lower > max_investment:
        # Rounding pushed the lower bound past M (e.g. M = 0.6)
        return max_investment, 1

    return lower, int((max_investment - lower) // step) + 1


def candidate_totals(
    max_investment: Decimal,
    lower_bound_ratio: Decimal = Decimal("0.9"),
    step: int = 1,
) -> Iterator[Decimal]:
    """Totals to evaluate, lowest first."""
    lower, count = candidate_bounds(max_investment, lower_bound_ratio, step)
    for i in range(count):
        yield lower + i * step


class CandidateSearchStrategy(AllocationStrategy):
    """Pick the candidate total whose rounded shares best match the weights."""

    def __init__(
        self,
        lower_bound_ratio: Decimal = Decimal("0.9"),
        step: int = 1,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        self.lower_bound_ratio = lower_bound_ratio
        self.step = step
        self.chunk_size = chunk_size

    def compute_portfolio(
        self,
        distribution: PortfolioDistribution,
        prices: Mapping[str, Decimal],
        max_investment: Decimal,
    ) -> Portfolio:
        if max_investment <= 0:
            raise ValueError(f"Investment must be positive, got {max_investment}")

        lower, count = candidate_bounds(max_investment, self.lower_bound_ratio, self.step)
        weights, price_array = collect_arrays(distribution, prices)

        best_index: Optional[int] = None
        best_score = np.inf
        best_quantities: Optional[np.ndarray] = None

        for start in range(0, count, self.chunk_size):
            offsets = np.arange(start, min(start + self.chunk_size, count))
            totals = float(lower) + offsets * float(self.step)
            quantities = quantities_for_totals(weights, price_array, totals)
            scores = deviations(weights, price_array, quantities)

            # argmin returns the first minimum, so ties keep the lowest total
            i = int(np.argmin(scores))
            if best_index is None or scores[i] < best_score:
                best_index = start + i
                best_score = scores[i]
                best_quantities = quantities[i]

        best_total = lower + best_index * self.step

        if np.isinf(best_score):
            logger.warning(
                "No candidate between %s and %s buys a single share",
                lower,
                lower + (count - 1) * self.step,
            )

        logger.debug(
            "Evaluated %d candidates, best total %s with deviation %.6f",
            count,
            best_total,
            best_score,
        )
        return build_portfolio(distribution, prices, best_quantities, best_total)
