"""
Investment Proportions - work out whole-share purchases for a target allocation.

Exports:
    StockProportion: Ticker and target weight
    PortfolioDistribution: Ordered target allocation across tickers
    StockQuantity: Whole shares of a ticker at a price
    Portfolio: Share quantities chosen for one investment total
    AllocatorConfig: Default distribution and search bounds
    InvestmentProportions: Fetches prices and computes the best portfolio
    PriceFetcher: Background price download
    QuoteProvider: Abstract base class for price sources
    QuoteError: Raised when prices cannot be retrieved
"""

from .config import DEFAULT_DISTRIBUTION, AllocatorConfig
from .fetcher import PriceFetcher
from .investment import InvestmentProportions
from .models import Portfolio, PortfolioDistribution, StockProportion, StockQuantity
from .optimizers import AllocationStrategy, CandidateSearchStrategy
from .quotes import (
    JsonFileQuoteProvider,
    QuoteError,
    QuoteProvider,
    StaticQuoteProvider,
    YahooQuoteProvider,
)

__all__ = [
    "DEFAULT_DISTRIBUTION",
    "AllocatorConfig",
    "PriceFetcher",
    "InvestmentProportions",
    "Portfolio",
    "PortfolioDistribution",
    "StockProportion",
    "StockQuantity",
    "AllocationStrategy",
    "CandidateSearchStrategy",
    "JsonFileQuoteProvider",
    "QuoteError",
    "QuoteProvider",
    "StaticQuoteProvider",
    "YahooQuoteProvider",
]
