"""Quote provider for Yahoo Finance via yfinance."""

import logging
from decimal import Decimal

import yfinance as yf

from .base import QuoteError, QuoteProvider

logger = logging.getLogger(__name__)


class YahooQuoteProvider(QuoteProvider):
    """Fetches the latest close for all tickers in a single batched download."""

    def __init__(self, period: str = "5d") -> None:
        self.period = period

    def get_prices(self, tickers: list[str]) -> dict[str, Decimal]:
        if not tickers:
            return {}

        df = yf.download(
            tickers,
            period=self.period,
            progress=False,
            auto_adjust=False,
            group_by="column",
            threads=False,
        )

        if df is None or df.empty:
            raise QuoteError(f"No price data returned for {', '.join(tickers)}")

        if "Close" not in df.columns.get_level_values(0):
            raise QuoteError("No 'Close' column in price data")

        closes = df["Close"]
        prices: dict[str, Decimal] = {}

        for ticker in tickers:
            if ticker not in closes.columns:
                raise QuoteError(f"Unknown ticker: {ticker}")

            series = closes[ticker].dropna()
            if series.empty:
                raise QuoteError(f"No valid close prices for {ticker}")

            prices[ticker] = Decimal(str(float(series.iloc[-1])))

        logger.debug("Fetched %d prices from Yahoo Finance", len(prices))
        return prices
