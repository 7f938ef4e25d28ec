from decimal import Decimal
from typing import Optional

from .config import AllocatorConfig
from .fetcher import PriceFetcher
from .models import Portfolio, PortfolioDistribution
from .optimizers import AllocationStrategy, CandidateSearchStrategy
from .quotes import QuoteProvider, YahooQuoteProvider


class InvestmentProportions:
    """Works out how many shares of each ticker to buy for a target distribution.

    Prices start downloading as soon as the instance is created, so callers
    can collect the investment amount while the request is in flight.
    """

    def __init__(
        self,
        distribution: Optional[PortfolioDistribution] = None,
        provider: Optional[QuoteProvider] = None,
        config: Optional[AllocatorConfig] = None,
        strategy: Optional[AllocationStrategy] = None,
    ) -> None:
        self.config = config or AllocatorConfig()
        self.distribution = distribution or self.config.DISTRIBUTION
        self.strategy = strategy or CandidateSearchStrategy(
            lower_bound_ratio=self.config.LOWER_BOUND_RATIO,
            step=self.config.CANDIDATE_STEP,
        )
        self.fetcher = PriceFetcher(provider or YahooQuoteProvider(), self.distribution.tickers())

    def compute_portfolio(self, max_investment: Decimal) -> Portfolio:
        """Choose share quantities for roughly ``max_investment`` dollars.

        Args:
            max_investment: Upper bound of the candidate totals to try.

        Returns:
            Portfolio with the lowest deviation from the distribution.

        Raises:
            QuoteError: If the background price fetch failed.
            ValueError: If a ticker has no price or the amount is not positive.
        """
        max_investment = Decimal(max_investment)
        if max_investment <= 0:
            raise ValueError(f"Investment must be positive, got {max_investment}")

        return self.strategy.compute_portfolio(
            self.distribution, self.fetcher.prices, max_investment
        )

    def __repr__(self) -> str:
        return (
            f"InvestmentProportions(distribution={self.distribution!r}, "
            f"strategy={type(self.strategy).__name__})"
        )
