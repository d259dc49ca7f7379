"""
Linear trend detection over a metric's history.

Ordinary least squares with the point index (0..n-1) as X, solved from the
closed-form sums:

    slope     = (n*Σxy - Σx*Σy) / (n*Σx² - (Σx)²)
    intercept = (Σy - slope*Σx) / n

Fewer than MIN_HISTORY_POINTS points means there is no trend data. Slopes
within the dead-zone (compared after rounding to SLOPE_PRECISION places) are
treated as flat.
"""
import numpy as np

from bank_health.schemas.bank import Direction, HistoryPoint, Trend, TrendFit

MIN_HISTORY_POINTS = 3
SLOPE_DEAD_ZONE = 0.01
# Decimal places kept before the dead-zone check; drops float residue from the sums
SLOPE_PRECISION = 10


def fit_trend(history: list[HistoryPoint]) -> TrendFit | None:
    n = len(history)
    if n < MIN_HISTORY_POINTS:
        return None

    x = np.arange(n, dtype=float)
    y = np.array([p.value for p in history], dtype=float)

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()

    denominator = n * sum_xx - sum_x * sum_x
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return TrendFit(slope=float(slope), intercept=float(intercept))


def classify_trend(history: list[HistoryPoint], direction: Direction) -> Trend:
    fit = fit_trend(history)
    if fit is None or abs(round(fit.slope, SLOPE_PRECISION)) <= SLOPE_DEAD_ZONE:
        return "neutral"

    rising = fit.slope > 0
    if direction == "lower-is-better":
        return "declining" if rising else "improving"
    return "improving" if rising else "declining"
