"""
Recommendation engine - combines scored safety and profitability metrics with
the average trend multiplier into a 0-100 composite.

safety_score        = Σ (base/10) * weight      (category ceiling 25)
profitability_score = Σ (base/10) * weight      (category ceiling 25)
trend_score         = (avg_multiplier - 0.7) / 0.6 * 50   (0-50)
final_score         = clamp(safety + profitability + trend, 0, 100)

Only metrics with at least 3 history points contribute to the average
multiplier; with none, the average is 1.0 (trend_score 25).

Category and trend scores are returned unrounded; only final_score is rounded
(half up). Stars, recommendation and confidence are read off the unrounded
final score.
"""
import logging
import statistics

from bank_health.analysis.grading import clamp, round_half_up, score_to_confidence, score_to_rating
from bank_health.analysis.metric_scorer import score_metric
from bank_health.analysis.trend import MIN_HISTORY_POINTS
from bank_health.schemas.bank import (
    BankRecommendation,
    MetricBreakdown,
    MetricDefinition,
    ScoreResult,
    is_available,
)

logger = logging.getLogger(__name__)

MIN_MULTIPLIER = 0.7
MULTIPLIER_RANGE = 0.6
TREND_POINTS = 50.0
STRENGTH_THRESHOLD = 6
MAX_HIGHLIGHTS = 3

_TREND_ARROWS = {"improving": " ↑", "declining": " ↓"}


def _relative_position(metric: MetricDefinition) -> int:
    """+1 better than benchmark, -1 worse, 0 level or unavailable."""
    if not is_available(metric.value) or metric.value == metric.benchmark:
        return 0
    above = metric.value > metric.benchmark
    if metric.direction == "lower-is-better":
        above = not above
    return 1 if above else -1


def _label(metric: MetricDefinition, result: ScoreResult) -> str:
    return metric.name + _TREND_ARROWS.get(result.trend, "")


def _highlights(scored: list[tuple[MetricDefinition, ScoreResult]]) -> tuple[list[str], list[str]]:
    # sorted() is stable, so tied scores keep definition order
    best_first = sorted(scored, key=lambda item: item[1].base_score, reverse=True)

    strengths = [
        _label(m, r) for m, r in best_first[:MAX_HIGHLIGHTS]
        if r.base_score >= STRENGTH_THRESHOLD and is_available(m.value)
    ]
    # Bottom of the same ranking, worst first
    concerns = [
        _label(m, r) for m, r in reversed(best_first[-MAX_HIGHLIGHTS:])
        if r.base_score < STRENGTH_THRESHOLD and is_available(m.value)
    ]
    return strengths, concerns


def aggregate(
    safety_metrics: list[MetricDefinition],
    profitability_metrics: list[MetricDefinition],
    current_price: float | None = None,
) -> BankRecommendation:
    scored: list[tuple[MetricDefinition, ScoreResult]] = []
    breakdown: list[MetricBreakdown] = []
    category_scores = {"safety": 0.0, "profitability": 0.0}
    multipliers: list[float] = []
    above = below = 0

    for category, metrics in (("safety", safety_metrics), ("profitability", profitability_metrics)):
        for metric in metrics:
            result = score_metric(metric.value, metric.benchmark, metric.direction, metric.history)
            weighted = (result.base_score / 10) * metric.weight
            category_scores[category] += weighted

            position = _relative_position(metric)
            if position > 0:
                above += 1
            elif position < 0:
                below += 1

            if len(metric.history) >= MIN_HISTORY_POINTS:
                multipliers.append(result.trend_multiplier)

            scored.append((metric, result))
            breakdown.append(MetricBreakdown(
                name=metric.name,
                category=category,
                value=metric.value,
                benchmark=metric.benchmark,
                direction=metric.direction,
                base_score=result.base_score,
                weighted_score=weighted,
                trend_multiplier=result.trend_multiplier,
                trend=result.trend,
            ))

    avg_multiplier = statistics.fmean(multipliers) if multipliers else 1.0
    trend_score = clamp(((avg_multiplier - MIN_MULTIPLIER) / MULTIPLIER_RANGE) * TREND_POINTS, 0, TREND_POINTS)

    safety_score = category_scores["safety"]
    profitability_score = category_scores["profitability"]
    final = clamp(safety_score + profitability_score + trend_score)

    stars, recommendation = score_to_rating(final)
    strengths, concerns = _highlights(scored)

    logger.debug(
        f"Composite {final:.2f}: safety={safety_score:.2f} profitability={profitability_score:.2f} "
        f"trend={trend_score:.2f} (avg multiplier {avg_multiplier:.3f} over {len(multipliers)} metrics)"
    )

    return BankRecommendation(
        final_score=round_half_up(final),
        stars=stars,
        recommendation=recommendation,
        confidence=score_to_confidence(final),
        safety_score=safety_score,
        profitability_score=profitability_score,
        trend_score=trend_score,
        metrics_above_average=above,
        metrics_below_average=below,
        strengths=strengths,
        concerns=concerns,
        current_price=current_price,
        breakdown=breakdown,
    )
