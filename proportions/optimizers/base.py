"""Abstract base class and shared scoring for allocation strategies."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Mapping

import numpy as np

from ..models import Portfolio, PortfolioDistribution, StockQuantity


class AllocationStrategy(ABC):
    """Abstract base class for turning target weights into whole shares."""

    @abstractmethod
    def compute_portfolio(
        self,
        distribution: PortfolioDistribution,
        prices: Mapping[str, Decimal],
        max_investment: Decimal,
    ) -> Portfolio:
        """Choose share quantities for the given distribution.

        Args:
            distribution: Target weights by ticker.
            prices: Current price per share by ticker.
            max_investment: Approximate amount of cash to invest.

        Returns:
            The chosen Portfolio.
        """
        pass


def collect_arrays(
    distribution: PortfolioDistribution,
    prices: Mapping[str, Decimal],
) -> tuple[np.ndarray, np.ndarray]:
    """Extract weights and prices as numpy arrays, ordered by the distribution."""
    weights, price_list = [], []

    for stock in distribution:
        if stock.ticker not in prices:
            raise ValueError(
                f"Ticker {stock.ticker} in distribution but no price provided"
            )
        weights.append(float(stock.weight))
        price_list.append(float(prices[stock.ticker]))

    return np.array(weights), np.array(price_list)


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer with halves going up, unlike np.rint."""
    return np.floor(values + 0.5).astype(np.int64)


def quantities_for_totals(
    weights: np.ndarray, prices: np.ndarray, totals: np.ndarray
) -> np.ndarray:
    """Share quantities for each candidate total; one row per total."""
    return round_half_up(weights[np.newaxis, :] * totals[:, np.newaxis] / prices[np.newaxis, :])


def deviations(
    weights: np.ndarray, prices: np.ndarray, quantities: np.ndarray
) -> np.ndarray:
    """L1 distance between target weights and realized weights, per row.

    Rows whose shares are worth nothing have no realized weights and score
    +inf, so they lose against any row that buys something.
    """
    quantities = np.atleast_2d(quantities)
    values = quantities * prices[np.newaxis, :]
    totals = values.sum(axis=1)

    with np.errstate(divide="ignore", invalid="ignore"):
        actual = values / totals[:, np.newaxis]
        result = np.abs(weights[np.newaxis, :] - actual).sum(axis=1)

    result[totals == 0] = np.inf
    return result


def portfolio_for_investment(
    distribution: PortfolioDistribution,
    prices: Mapping[str, Decimal],
    investment: Decimal,
) -> Portfolio:
    """Build the candidate Portfolio for a single investment total."""
    weights, price_array = collect_arrays(distribution, prices)
    totals = np.array([float(investment)])
    quantities = quantities_for_totals(weights, price_array, totals)[0]
    return build_portfolio(distribution, prices, quantities, investment)


def build_portfolio(
    distribution: PortfolioDistribution,
    prices: Mapping[str, Decimal],
    quantities: np.ndarray,
    investment: Decimal,
) -> Portfolio:
    stocks = tuple(
        StockQuantity(ticker=stock.ticker, quantity=int(qty), price=prices[stock.ticker])
        for stock, qty in zip(distribution, quantities)
    )
    return Portfolio(stocks=stocks, target_total=Decimal(investment))


def compute_deviation(distribution: PortfolioDistribution, portfolio: Portfolio) -> float:
    """Deviation of a portfolio from the desired distribution (lower is better)."""
    weights = np.array([float(distribution.weight(stock.ticker)) for stock in portfolio.stocks])
    prices = np.array([float(stock.price) for stock in portfolio.stocks])
    quantities = np.array([stock.quantity for stock in portfolio.stocks])
    return float(deviations(weights, prices, quantities)[0])
