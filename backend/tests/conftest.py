"""
Shared pytest fixtures for the bank health test suite.

Provides:
  - ``make_history``: factory turning a list of values into an oldest-first
    history with year-end dates.
  - ``sample_snapshot``: a three-period bank snapshot whose scores are worked
    out by hand in test_bank_analyzer.py.
"""

from __future__ import annotations

import pytest

from bank_health.schemas.bank import BankSnapshot, HistoryPoint, RegulatoryMetrics, StatementPeriod


def history_of(values: list[float], start_year: int = 2015) -> list[HistoryPoint]:
    return [
        HistoryPoint(date=f"{start_year + i}-12-31", value=v)
        for i, v in enumerate(values)
    ]


@pytest.fixture
def make_history():
    return history_of


def _period(date: str, net_income: float) -> StatementPeriod:
    return StatementPeriod(
        date=date,
        revenue=1000.0,
        operating_expenses=500.0,
        interest_income=800.0,
        interest_expense=300.0,
        net_income=net_income,
        total_assets=10000.0,
        net_receivables=4000.0,
        short_term_investments=1000.0,
        long_term_investments=1500.0,
        total_stockholders_equity=1000.0,
        goodwill=100.0,
        intangible_assets=50.0,
        preferred_stock=50.0,
        common_shares_outstanding=10.0,
        current_ratio=0.35,
        debt_to_equity=1.0,
    )


@pytest.fixture
def sample_snapshot() -> BankSnapshot:
    """Most recent period first; net income grows 110 -> 130 -> 150."""
    return BankSnapshot(
        ticker="TEST",
        company_name="Test Bancorp",
        current_price=120.0,
        periods=[
            _period("2024-12-31", 150.0),
            _period("2023-12-31", 130.0),
            _period("2022-12-31", 110.0),
        ],
        regulatory=RegulatoryMetrics(
            npl_ratio=0.5,
            capital_adequacy_ratio=15.0,
            cet1_ratio=13.0,
        ),
    )
