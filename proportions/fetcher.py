"""Background price fetching."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from decimal import Decimal
from typing import Optional

from .quotes import QuoteProvider

logger = logging.getLogger(__name__)


class PriceFetcher:
    """Fetches prices for a set of tickers on a background thread.

    The request starts as soon as the fetcher is created. The first access to
    ``prices`` blocks until it completes, caches the result and tears down the
    worker thread. Provider errors are re-raised on that first access.
    """

    def __init__(self, provider: QuoteProvider, tickers: list[str]) -> None:
        self.tickers = list(tickers)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="price-fetch")
        self._prices: Optional[dict[str, Decimal]] = None
        logger.debug("Fetching prices for %s", ", ".join(self.tickers))
        self._future: Future[dict[str, Decimal]] = self._executor.submit(
            provider.get_prices, self.tickers
        )

    @property
    def prices(self) -> dict[str, Decimal]:
        if self._prices is None:
            try:
                self._prices = dict(self._future.result())
            finally:
                self._executor.shutdown(wait=False)
            logger.debug("Received prices: %s", self._prices)
        return self._prices
