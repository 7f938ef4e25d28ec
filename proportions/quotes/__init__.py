"""Quote providers for current share prices."""

from .base import QuoteError, QuoteProvider
from .local import JsonFileQuoteProvider, StaticQuoteProvider
from .yahoo import YahooQuoteProvider

__all__ = [
    "QuoteError",
    "QuoteProvider",
    "JsonFileQuoteProvider",
    "StaticQuoteProvider",
    "YahooQuoteProvider",
]
