"""Configuration constants for the investment proportions calculator."""

from dataclasses import dataclass, field
from decimal import Decimal

from .models import PortfolioDistribution, StockProportion


def _default_distribution() -> PortfolioDistribution:
    return PortfolioDistribution(
        [
            StockProportion("VTI", Decimal("0.36")),
            StockProportion("VEA", Decimal("0.25")),
            StockProportion("VWO", Decimal("0.19")),
            StockProportion("VIG", Decimal("0.10")),
            StockProportion("BND", Decimal("0.10")),
        ]
    )


@dataclass(frozen=True)
class AllocatorConfig:
    """Configuration for the allocation search."""

    DISTRIBUTION: PortfolioDistribution = field(default_factory=_default_distribution)
    LOWER_BOUND_RATIO: Decimal = Decimal("0.9")
    CANDIDATE_STEP: int = 1


DEFAULT_DISTRIBUTION = _default_distribution()
