"""Quote providers backed by local data instead of a market feed."""

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from .base import QuoteError, QuoteProvider


class StaticQuoteProvider(QuoteProvider):
    """Serves prices from a fixed mapping."""

    def __init__(self, prices: dict[str, Decimal]) -> None:
        self._prices = dict(prices)

    def get_prices(self, tickers: list[str]) -> dict[str, Decimal]:
        missing = [ticker for ticker in tickers if ticker not in self._prices]
        if missing:
            raise QuoteError(f"No price available for: {', '.join(missing)}")
        return {ticker: self._prices[ticker] for ticker in tickers}


class JsonFileQuoteProvider(QuoteProvider):
    """Reads prices from a JSON file shaped like {"VTI": 245.1, ...}."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_prices(self, tickers: list[str]) -> dict[str, Decimal]:
        try:
            raw = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise QuoteError(f"Could not read prices from {self.path}: {e}") from e

        if not isinstance(raw, dict):
            raise QuoteError(f"Expected a JSON object in {self.path}")

        try:
            prices = {ticker: Decimal(str(price)) for ticker, price in raw.items()}
        except InvalidOperation as e:
            raise QuoteError(f"Malformed price in {self.path}") from e

        return StaticQuoteProvider(prices).get_prices(tickers)
