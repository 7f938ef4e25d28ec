"""Abstract base class for quote providers."""

from abc import ABC, abstractmethod
from decimal import Decimal


class QuoteError(Exception):
    """Raised when current prices cannot be retrieved."""


class QuoteProvider(ABC):
    """Abstract base class for current price sources."""

    @abstractmethod
    def get_prices(self, tickers: list[str]) -> dict[str, Decimal]:
        """Fetch the current price per share for each ticker.

        Args:
            tickers: Ticker symbols to quote.

        Returns:
            Dictionary mapping every requested ticker to its price.

        Raises:
            QuoteError: If any ticker cannot be quoted.
        """
        pass
