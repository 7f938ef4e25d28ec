"""Allocation search strategies."""

from .base import AllocationStrategy, compute_deviation, portfolio_for_investment
from .candidate_search import CandidateSearchStrategy, candidate_bounds, candidate_totals

__all__ = [
    "AllocationStrategy",
    "CandidateSearchStrategy",
    "candidate_bounds",
    "candidate_totals",
    "compute_deviation",
    "portfolio_for_investment",
]
