"""Console rendering of a chosen portfolio."""

from decimal import Decimal

from rich import box
from rich.console import Group
from rich.table import Table
from rich.text import Text

from .models import Portfolio


def report_rows(portfolio: Portfolio) -> list[tuple[str, Decimal, int, Decimal]]:
    """(ticker, price, quantity, percent of total) for each stock.

    A portfolio worth nothing reports 0% for every row.
    """
    total = portfolio.total_value()
    rows = []
    for stock in portfolio.stocks:
        pct = stock.market_value * 100 / total if total else Decimal("0")
        rows.append((stock.ticker, stock.price, stock.quantity, pct))
    return rows


def portfolio_table(portfolio: Portfolio) -> Table:
    """Build a Rich table with one row per ticker in the portfolio."""
    t = Table(box=box.ROUNDED, title="Shares to buy", title_style="bold white")
    t.add_column("Ticker", style="cyan")
    t.add_column("Price", justify="right")
    t.add_column("Shares", justify="right")
    t.add_column("Value", justify="right")
    t.add_column("Alloc", justify="right", style="yellow")

    for ticker, price, quantity, pct in report_rows(portfolio):
        t.add_row(
            ticker,
            f"{price:.2f}",
            str(quantity),
            f"{Decimal(quantity) * price:.2f}",
            f"{pct:.2f}%",
        )
    return t


def render_report(portfolio: Portfolio) -> Group:
    """Total invested followed by the per-ticker table."""
    total = Text.assemble(
        "Total investment: ",
        (f"{portfolio.total_value():.2f}", "bold"),
    )
    return Group(total, portfolio_table(portfolio))
