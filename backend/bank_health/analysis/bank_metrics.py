"""
Derived bank metrics from primitive statement fields.

Every function returns a MetricValue: a float, or NA when an input is missing
or a denominator is zero/negative. NaN never leaves this module.

Provider-reported key metrics (ROA, ROE, net profit margin, ...) take
precedence over derived values whenever they are present.

History building mirrors how statement feeds arrive: periods are given most
recent first, histories are returned oldest first.
"""
import logging
import math
from typing import Callable

from bank_health.schemas.bank import NA, HistoryPoint, MetricValue, StatementPeriod, is_available

logger = logging.getLogger(__name__)


def efficiency_ratio(opex: float | None, revenue: float | None) -> MetricValue:
    if not opex or not revenue or revenue <= 0:
        return NA
    return (opex / revenue) * 100


def net_interest_margin(
    interest_income: float | None,
    interest_expense: float | None,
    total_assets: float | None,
) -> MetricValue:
    # Total assets stand in for average interest-earning assets
    if not interest_income or not interest_expense or not total_assets or total_assets <= 0:
        return NA
    return ((interest_income - interest_expense) / total_assets) * 100


def loan_to_assets(
    net_receivables: float | None,
    short_term_investments: float | None,
    long_term_investments: float | None,
    total_assets: float | None,
) -> MetricValue:
    # Receivables plus investments approximate the loan book
    if not total_assets or total_assets <= 0:
        return NA
    loan_like = (net_receivables or 0) + (short_term_investments or 0) + (long_term_investments or 0)
    if loan_like == 0:
        return NA
    return (loan_like / total_assets) * 100


def _percent_of(numerator: float | None, denominator: float | None) -> MetricValue:
    if not numerator or not denominator or denominator <= 0:
        return NA
    return (numerator / denominator) * 100


def return_on_assets(net_income: float | None, total_assets: float | None) -> MetricValue:
    return _percent_of(net_income, total_assets)


def return_on_equity(net_income: float | None, equity: float | None) -> MetricValue:
    return _percent_of(net_income, equity)


def net_profit_margin(net_income: float | None, revenue: float | None) -> MetricValue:
    return _percent_of(net_income, revenue)


def tangible_common_equity(
    equity: float | None,
    goodwill: float | None = None,
    intangibles: float | None = None,
    preferred_stock: float | None = None,
) -> MetricValue:
    """TCE = equity - goodwill - intangibles - preferred stock."""
    if equity is None:
        return NA
    return equity - (goodwill or 0) - (intangibles or 0) - (preferred_stock or 0)


def return_on_tangible_common_equity(net_income: float | None, tce: MetricValue) -> MetricValue:
    if not is_available(tce) or tce <= 0 or not net_income:
        return NA
    return (net_income / tce) * 100


def tangible_book_value_per_share(tce: MetricValue, shares_outstanding: float | None) -> MetricValue:
    if not is_available(tce) or not shares_outstanding or shares_outstanding <= 0:
        return NA
    return tce / shares_outstanding


def prefer_reported(reported: float | None, derived: MetricValue) -> MetricValue:
    """A provider's own value wins over a derived one when present.

    A non-finite reported value counts as absent.
    """
    if reported is not None and math.isfinite(reported):
        return reported
    return derived


def _reported(value: float | None) -> MetricValue:
    return prefer_reported(value, NA)


def derive_period_metrics(period: StatementPeriod) -> dict[str, MetricValue]:
    """Compute every statement-based metric for one reporting period."""
    tce = tangible_common_equity(
        period.total_stockholders_equity,
        period.goodwill,
        period.intangible_assets,
        period.preferred_stock,
    )
    metrics: dict[str, MetricValue] = {
        "roa": prefer_reported(
            period.return_on_assets,
            return_on_assets(period.net_income, period.total_assets),
        ),
        "roe": prefer_reported(
            period.return_on_equity,
            return_on_equity(period.net_income, period.total_stockholders_equity),
        ),
        "nim": net_interest_margin(period.interest_income, period.interest_expense, period.total_assets),
        "efficiency_ratio": efficiency_ratio(period.operating_expenses, period.revenue),
        "net_profit_margin": prefer_reported(
            period.net_profit_margin,
            net_profit_margin(period.net_income, period.revenue),
        ),
        "loan_to_assets": loan_to_assets(
            period.net_receivables,
            period.short_term_investments,
            period.long_term_investments,
            period.total_assets,
        ),
        "current_ratio": _reported(period.current_ratio),
        "debt_to_equity": _reported(period.debt_to_equity),
        "rotce": prefer_reported(
            period.return_on_tangible_equity,
            return_on_tangible_common_equity(period.net_income, tce),
        ),
        "tbvps": tangible_book_value_per_share(tce, period.common_shares_outstanding),
    }

    missing = [name for name, value in metrics.items() if not is_available(value)]
    if missing:
        logger.debug(f"Period {period.date}: unavailable metrics {', '.join(missing)}")
    return metrics


def build_history(
    periods: list[StatementPeriod],
    metric: str | Callable[[StatementPeriod], MetricValue],
    limit: int = 10,
) -> list[HistoryPoint]:
    """Evaluate one metric across periods (most recent first) into an oldest-first history.

    Periods without a date or without a value for the metric are dropped.
    At most ``limit`` of the most recent points are kept.
    """
    if isinstance(metric, str):
        key = metric

        def compute(period: StatementPeriod) -> MetricValue:
            return derive_period_metrics(period).get(key, NA)
    else:
        compute = metric

    points: list[HistoryPoint] = []
    if limit <= 0:
        return points
    for period in periods:
        if not period.date:
            continue
        value = compute(period)
        if is_available(value):
            points.append(HistoryPoint(date=period.date, value=value))
        if len(points) >= limit:
            break

    points.reverse()
    return points
