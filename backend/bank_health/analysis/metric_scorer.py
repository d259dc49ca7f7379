"""
Per-metric scoring against the bank sector benchmark.

base score: percentage difference from the benchmark (sign flipped for
lower-is-better metrics) bucketed into 0/2/4/6/8/10.
trend multiplier: 1.3 improving, 0.7 declining, 1.0 otherwise.

Missing values score a neutral 5 rather than being penalised.
"""
import logging

from bank_health.analysis.grading import diff_to_base_score
from bank_health.analysis.trend import MIN_HISTORY_POINTS, classify_trend
from bank_health.schemas.bank import Direction, HistoryPoint, MetricValue, ScoreResult, is_available

logger = logging.getLogger(__name__)

NEUTRAL_BASE_SCORE = 5

TREND_MULTIPLIERS: dict[str, float] = {
    "improving": 1.3,
    "declining": 0.7,
    "neutral":   1.0,
}

NEUTRAL_RESULT = ScoreResult(base_score=NEUTRAL_BASE_SCORE, trend_multiplier=1.0, trend="neutral")


def effective_difference(value: float, benchmark: float, direction: Direction) -> float:
    """Percent above (+) or below (-) benchmark, oriented so positive is always better."""
    percent_diff = (value - benchmark) / benchmark * 100
    return -percent_diff if direction == "lower-is-better" else percent_diff


def score_metric(
    value: MetricValue,
    benchmark: float,
    direction: Direction,
    history: list[HistoryPoint] | None = None,
) -> ScoreResult:
    if not is_available(value):
        return NEUTRAL_RESULT
    if benchmark == 0:
        logger.debug("Zero benchmark, percentage difference undefined; scoring neutral")
        return NEUTRAL_RESULT

    base_score = diff_to_base_score(effective_difference(value, benchmark, direction))

    history = history or []
    trend = classify_trend(history, direction) if len(history) >= MIN_HISTORY_POINTS else "neutral"

    return ScoreResult(
        base_score=base_score,
        trend_multiplier=TREND_MULTIPLIERS[trend],
        trend=trend,
    )
