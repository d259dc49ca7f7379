"""
Bank analysis pipeline: snapshot -> metric definitions -> recommendation.

Current values come from the most recent statement period plus the
regulatory feed. Histories are built from every period (oldest first).

Scored metrics:
- Safety (25 pts, 6.25 each): NPL ratio, CAR (Tier 1 fallback), CET1, Debt-to-Equity
- Profitability (25 pts, 5 each): ROA, ROE, NIM, ROTCE, Efficiency Ratio

Net profit margin, loan-to-assets, current ratio and TBVPS are reported but
not scored.
"""
import logging

from bank_health.analysis.bank_metrics import build_history, derive_period_metrics
from bank_health.analysis.recommendation_engine import aggregate
from bank_health.analysis.sector_benchmarks import (
    BANK_BENCHMARKS,
    CATEGORY_POINTS,
    METRIC_LABELS,
    PROFITABILITY_METRICS,
    SAFETY_METRICS,
)
from bank_health.config import get_settings
from bank_health.schemas.bank import (
    NA,
    BankAnalysis,
    BankSnapshot,
    HistoryPoint,
    MetricDefinition,
    MetricValue,
    is_available,
)

logger = logging.getLogger(__name__)

_STATEMENT_METRICS = [
    "roa", "roe", "nim", "efficiency_ratio", "net_profit_margin",
    "loan_to_assets", "current_ratio", "debt_to_equity", "rotce", "tbvps",
]


def _current_values(snapshot: BankSnapshot) -> dict[str, MetricValue]:
    if snapshot.periods:
        values = derive_period_metrics(snapshot.periods[0])
    else:
        values = {key: NA for key in _STATEMENT_METRICS}

    reg = snapshot.regulatory
    car = reg.capital_adequacy_ratio
    if not is_available(car):
        car = reg.tier1_capital_ratio

    values["npl_ratio"] = reg.npl_ratio
    values["car"] = car
    values["cet1"] = reg.cet1_ratio
    return values


def _histories(snapshot: BankSnapshot, limit: int) -> dict[str, list[HistoryPoint]]:
    histories = {key: build_history(snapshot.periods, key, limit) for key in _STATEMENT_METRICS}
    reg = snapshot.regulatory
    histories["npl_ratio"] = reg.npl_ratio_history[-limit:] if limit > 0 else []
    histories["car"] = reg.car_history[-limit:] if limit > 0 else []
    histories["cet1"] = reg.cet1_history[-limit:] if limit > 0 else []
    return histories


def build_metric_definitions(
    values: dict[str, MetricValue],
    histories: dict[str, list[HistoryPoint]],
) -> tuple[list[MetricDefinition], list[MetricDefinition]]:
    """Turn current values and histories into (safety, profitability) definitions."""

    def define(category: list[tuple[str, str]]) -> list[MetricDefinition]:
        weight = CATEGORY_POINTS / len(category)
        return [
            MetricDefinition(
                name=METRIC_LABELS[key],
                value=values.get(key, NA),
                benchmark=BANK_BENCHMARKS[key],
                direction=direction,
                history=histories.get(key, []),
                weight=weight,
            )
            for key, direction in category
        ]

    return define(SAFETY_METRICS), define(PROFITABILITY_METRICS)


def price_to_tangible_book(current_price: float | None, tbvps: MetricValue) -> MetricValue:
    if not current_price or not is_available(tbvps) or tbvps <= 0:
        return NA
    return current_price / tbvps


def analyze_bank(snapshot: BankSnapshot, history_periods: int | None = None) -> BankAnalysis:
    if history_periods is None:
        history_periods = get_settings().history_periods

    values = _current_values(snapshot)
    histories = _histories(snapshot, history_periods)
    safety, profitability = build_metric_definitions(values, histories)

    data_gaps = [m.name for m in safety + profitability if not is_available(m.value)]
    if data_gaps:
        logger.debug(f"{snapshot.ticker}: missing {len(data_gaps)} scored metrics: {', '.join(data_gaps)}")

    recommendation = aggregate(safety, profitability, snapshot.current_price)
    logger.info(
        f"{snapshot.ticker}: score {recommendation.final_score} "
        f"({recommendation.recommendation}, {recommendation.stars} stars, {recommendation.confidence} confidence)"
    )

    return BankAnalysis(
        ticker=snapshot.ticker,
        company_name=snapshot.company_name,
        metrics=values,
        histories=histories,
        price_to_tangible_book=price_to_tangible_book(snapshot.current_price, values.get("tbvps", NA)),
        data_gaps=data_gaps,
        recommendation=recommendation,
    )
