"""Data models for the investment proportions calculator."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator


@dataclass(frozen=True)
class StockProportion:
    """A ticker and the fraction of the portfolio it should represent."""

    ticker: str
    weight: Decimal


class PortfolioDistribution:
    """Ordered target allocation across tickers."""

    def __init__(self, stocks: Iterable[StockProportion]) -> None:
        self.stocks: tuple[StockProportion, ...] = tuple(stocks)

        seen: set[str] = set()
        for stock in self.stocks:
            if stock.ticker in seen:
                raise ValueError(f"Duplicate ticker in distribution: {stock.ticker}")
            seen.add(stock.ticker)

        self._weights = {stock.ticker: stock.weight for stock in self.stocks}

    @classmethod
    def from_dict(cls, weights: dict[str, Decimal]) -> "PortfolioDistribution":
        return cls(StockProportion(ticker, Decimal(weight)) for ticker, weight in weights.items())

    def tickers(self) -> list[str]:
        return [stock.ticker for stock in self.stocks]

    def weight(self, ticker: str) -> Decimal:
        return self._weights[ticker]

    def __iter__(self) -> Iterator[StockProportion]:
        return iter(self.stocks)

    def __len__(self) -> int:
        return len(self.stocks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PortfolioDistribution):
            return NotImplemented
        return self.stocks == other.stocks

    def __repr__(self) -> str:
        return f"PortfolioDistribution({dict(self._weights)})"


@dataclass(frozen=True)
class StockQuantity:
    """Whole shares of a ticker at the price used to compute them."""

    ticker: str
    quantity: int
    price: Decimal

    @property
    def market_value(self) -> Decimal:
        return Decimal(self.quantity) * self.price


@dataclass(frozen=True)
class Portfolio:
    """Share quantities computed for one candidate investment total."""

    stocks: tuple[StockQuantity, ...]
    target_total: Decimal

    def total_value(self) -> Decimal:
        return sum(
            (stock.market_value for stock in self.stocks),
            start=Decimal("0")
        )

    def allocation(self) -> dict[str, Decimal]:
        total = self.total_value()
        if total == 0:
            return {}

        return {
            stock.ticker: stock.market_value / total
            for stock in self.stocks
        }

    def quantities(self) -> dict[str, int]:
        return {stock.ticker: stock.quantity for stock in self.stocks}

    def __str__(self) -> str:
        return ", ".join(
            f"{stock.quantity} {stock.ticker} @ ${stock.price:.2f}" for stock in self.stocks
        )
