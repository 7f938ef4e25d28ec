#!/usr/bin/env python3
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from proportions import (
    InvestmentProportions,
    PortfolioDistribution,
    QuoteError,
    QuoteProvider,
)
from proportions.report import render_report

logger = logging.getLogger(__name__)
console = Console()

INVESTMENT_PROMPT = "Around how much money are you investing?"


def read_investment() -> Decimal:
    """Ask for the amount to invest. Raises on anything that is not a number."""
    answer = Prompt.ask(INVESTMENT_PROMPT, console=console)
    amount = Decimal(answer.strip())
    if not amount.is_finite():
        raise InvalidOperation(f"Not a finite amount: {answer}")
    return amount


def run(proportions: InvestmentProportions) -> None:
    amount = read_investment()

    with console.status("[bold]Waiting for prices...[/bold]"):
        portfolio = proportions.compute_portfolio(amount)

    logger.debug("Chosen portfolio for %s: %s", amount, portfolio)
    console.print(render_report(portfolio))


def main(
    distribution: Optional[PortfolioDistribution] = None,
    provider: Optional[QuoteProvider] = None,
) -> None:
    """Entry point for the CLI application."""
    # Starts the price download before the user is prompted
    proportions = InvestmentProportions(distribution=distribution, provider=provider)

    try:
        run(proportions)
    except (InvalidOperation, EOFError):
        console.print("[red]Expected a numeric amount to invest.[/red]")
        sys.exit(1)
    except (QuoteError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
