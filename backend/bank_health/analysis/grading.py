"""Threshold tables for converting scores to buckets, stars, signals and confidence."""
import math


def diff_to_base_score(effective_diff: float) -> int:
    """Bucket a benchmark-relative percentage difference into a 0-10 base score.

    Thresholds are exclusive: exactly +20% lands in the 8 bucket, not 10.
    """
    if effective_diff > 20:
        return 10
    elif effective_diff > 10:
        return 8
    elif effective_diff > 0:
        return 6
    elif effective_diff > -10:
        return 4
    elif effective_diff > -20:
        return 2
    else:
        return 0


def score_to_rating(score: float) -> tuple[int, str]:
    """Convert a 0-100 composite score to (stars, recommendation)."""
    if score >= 70:
        return (5 if score >= 85 else 4), "Buy"
    elif score >= 45:
        return 3, "Hold"
    else:
        return (2 if score >= 30 else 1), "Sell"


def score_to_confidence(score: float) -> str:
    if score >= 70:
        return "High"
    elif score >= 50:
        return "Medium"
    else:
        return "Low"


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
