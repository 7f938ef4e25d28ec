"""Tests for the report rendering and the command line entry point."""

from decimal import Decimal
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

import cli
from proportions.config import DEFAULT_DISTRIBUTION
from proportions.models import Portfolio, PortfolioDistribution, StockQuantity
from proportions.optimizers import CandidateSearchStrategy
from proportions.quotes import StaticQuoteProvider
from proportions.report import render_report, report_rows

PRICES = {
    "VTI": Decimal("245.12"),
    "VEA": Decimal("48.37"),
    "VWO": Decimal("43.05"),
    "VIG": Decimal("181.90"),
    "BND": Decimal("72.64"),
}


def _render(renderable) -> str:
    buf = StringIO()
    Console(file=buf, width=120).print(renderable)
    return buf.getvalue()


@pytest.fixture
def test_console(monkeypatch):
    console = Console(file=StringIO(), width=120)
    monkeypatch.setattr(cli, "console", console)
    return console


class TestReportRows:
    def test_rows(self):
        portfolio = Portfolio(
            stocks=(
                StockQuantity("A", 5, Decimal("10")),
                StockQuantity("B", 3, Decimal("20")),
            ),
            target_total=Decimal("100"),
        )
        rows = report_rows(portfolio)
        assert [r[:3] for r in rows] == [("A", Decimal("10"), 5), ("B", Decimal("20"), 3)]
        assert rows[0][3] == pytest.approx(Decimal(5000) / Decimal(110))

    def test_percentages_sum_to_100(self):
        portfolio = CandidateSearchStrategy().compute_portfolio(
            DEFAULT_DISTRIBUTION, PRICES, Decimal("10000")
        )
        displayed = [round(pct, 2) for *_, pct in report_rows(portfolio)]
        assert abs(sum(displayed) - 100) <= Decimal("0.05")

    def test_zero_total(self):
        portfolio = Portfolio(
            stocks=(StockQuantity("A", 0, Decimal("1000")),),
            target_total=Decimal("90"),
        )
        assert report_rows(portfolio) == [("A", Decimal("1000"), 0, Decimal("0"))]


class TestRenderReport:
    def test_contents(self):
        portfolio = Portfolio(
            stocks=(
                StockQuantity("A", 5, Decimal("10")),
                StockQuantity("B", 3, Decimal("20")),
            ),
            target_total=Decimal("100"),
        )
        output = _render(render_report(portfolio))

        assert "Total investment: 110.00" in output
        assert "10.00" in output
        assert "45.45%" in output
        assert "54.55%" in output

    def test_zero_total(self):
        portfolio = Portfolio(
            stocks=(StockQuantity("A", 0, Decimal("1000")),),
            target_total=Decimal("90"),
        )
        output = _render(render_report(portfolio))
        assert "Total investment: 0.00" in output
        assert "0.00%" in output


class TestReadInvestment:
    @patch("cli.Prompt.ask", return_value=" 1500.50 ")
    def test_parses_number(self, mock_ask, test_console):
        assert cli.read_investment() == Decimal("1500.50")
        assert mock_ask.call_args.args[0] == "Around how much money are you investing?"

    @patch("cli.Prompt.ask", return_value="NaN")
    def test_rejects_nan(self, mock_ask, test_console):
        with pytest.raises(Exception):
            cli.read_investment()


class TestMain:
    @patch("cli.Prompt.ask", return_value="100")
    def test_prints_report(self, mock_ask, test_console):
        distribution = PortfolioDistribution.from_dict({"A": Decimal("0.5"), "B": Decimal("0.5")})
        provider = StaticQuoteProvider({"A": Decimal("10"), "B": Decimal("20")})

        cli.main(distribution=distribution, provider=provider)

        output = test_console.file.getvalue()
        assert "Total investment: 110.00" in output
        assert "45.45%" in output

    @patch("cli.Prompt.ask", return_value="100")
    def test_default_distribution(self, mock_ask, test_console):
        cli.main(provider=StaticQuoteProvider(PRICES))

        output = test_console.file.getvalue()
        for ticker in DEFAULT_DISTRIBUTION.tickers():
            assert ticker in output

    @pytest.mark.parametrize("answer", ["abc", "", "NaN", "Infinity"])
    def test_non_numeric_input_exits(self, answer, test_console):
        with patch("cli.Prompt.ask", return_value=answer):
            with pytest.raises(SystemExit) as exc_info:
                cli.main(provider=StaticQuoteProvider(PRICES))

        assert exc_info.value.code == 1
        assert "numeric amount" in test_console.file.getvalue()

    @patch("cli.Prompt.ask", side_effect=EOFError)
    def test_missing_input_exits(self, mock_ask, test_console):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(provider=StaticQuoteProvider(PRICES))
        assert exc_info.value.code == 1

    @patch("cli.Prompt.ask", return_value="0")
    def test_non_positive_amount_exits(self, mock_ask, test_console):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(provider=StaticQuoteProvider(PRICES))
        assert exc_info.value.code == 1
        assert "must be positive" in test_console.file.getvalue()

    @patch("cli.Prompt.ask", return_value="1E+40")
    def test_amount_too_large_exits(self, mock_ask, test_console):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(provider=StaticQuoteProvider(PRICES))
        assert exc_info.value.code == 1
        output = test_console.file.getvalue()
        assert "too large" in output
        assert "numeric amount" not in output

    @patch("cli.Prompt.ask", return_value="1000")
    def test_quote_failure_exits(self, mock_ask, test_console):
        provider = StaticQuoteProvider({"VTI": Decimal("245.12")})
        with pytest.raises(SystemExit) as exc_info:
            cli.main(provider=provider)
        assert exc_info.value.code == 1
        assert "No price available" in test_console.file.getvalue()
