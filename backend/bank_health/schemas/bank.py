from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class NotAvailable(str, Enum):
    """Explicit absence of a metric value. Serialised as "N/A"."""

    NA = "N/A"


NA = NotAvailable.NA

MetricValue = Union[float, NotAvailable]
Direction = Literal["higher-is-better", "lower-is-better"]
Trend = Literal["improving", "declining", "neutral"]


def is_available(value) -> bool:
    return not isinstance(value, NotAvailable)


class HistoryPoint(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    date: str  # ISO date
    value: float


class TrendFit(BaseModel):
    model_config = ConfigDict(frozen=True)

    slope: float
    intercept: float


class MetricDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    value: MetricValue = NA
    benchmark: float
    direction: Direction = "higher-is-better"
    history: list[HistoryPoint] = []  # oldest first
    weight: float


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_score: int  # 0, 2, 4, 6, 8, 10 (5 when the value is missing)
    trend_multiplier: float  # 0.7, 1.0, 1.3
    trend: Trend = "neutral"


class MetricBreakdown(BaseModel):
    name: str
    category: Literal["safety", "profitability"]
    value: MetricValue = NA
    benchmark: float
    direction: Direction
    base_score: int
    weighted_score: float
    trend_multiplier: float
    trend: Trend


class BankRecommendation(BaseModel):
    final_score: int = 0  # 0-100
    stars: int = 1  # 1-5
    recommendation: Literal["Buy", "Hold", "Sell"] = "Hold"
    confidence: Literal["High", "Medium", "Low"] = "Low"
    safety_score: float = 0  # 0-25
    profitability_score: float = 0  # 0-25
    trend_score: float = 0  # 0-50
    metrics_above_average: int = 0
    metrics_below_average: int = 0
    strengths: list[str] = []
    concerns: list[str] = []
    current_price: float | None = None
    breakdown: list[MetricBreakdown] = []


# ── Snapshot input ────────────────────────────────────────────────


class StatementPeriod(BaseModel):
    """One reporting period of statement fields plus provider key metrics.

    Percent-style key metrics (ROA, ROE, net profit margin, ROTCE) are
    expected in percent units, matching the sector benchmark table.
    NaN and infinities are rejected at validation.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    date: str | None = None

    # Income statement
    revenue: float | None = None
    operating_expenses: float | None = None
    interest_income: float | None = None
    interest_expense: float | None = None
    net_income: float | None = None

    # Balance sheet
    total_assets: float | None = None
    net_receivables: float | None = None
    short_term_investments: float | None = None
    long_term_investments: float | None = None
    total_stockholders_equity: float | None = None
    goodwill: float | None = None
    intangible_assets: float | None = None
    preferred_stock: float | None = None
    common_shares_outstanding: float | None = None

    # Provider-reported key metrics (take precedence over derived values)
    return_on_assets: float | None = None
    return_on_equity: float | None = None
    return_on_tangible_equity: float | None = None
    net_profit_margin: float | None = None
    current_ratio: float | None = None
    debt_to_equity: float | None = None


class RegulatoryMetrics(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    npl_ratio: MetricValue = NA
    capital_adequacy_ratio: MetricValue = NA
    tier1_capital_ratio: MetricValue = NA
    cet1_ratio: MetricValue = NA
    npl_ratio_history: list[HistoryPoint] = []
    car_history: list[HistoryPoint] = []
    cet1_history: list[HistoryPoint] = []


class BankSnapshot(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    ticker: str = ""
    company_name: str | None = None
    current_price: float | None = None
    periods: list[StatementPeriod] = []  # most recent first
    regulatory: RegulatoryMetrics = RegulatoryMetrics()


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    safety_metrics: list[MetricDefinition] = []
    profitability_metrics: list[MetricDefinition] = []
    current_price: float | None = None


class BankAnalysis(BaseModel):
    ticker: str
    company_name: str | None = None
    metrics: dict[str, MetricValue] = {}
    histories: dict[str, list[HistoryPoint]] = {}
    price_to_tangible_book: MetricValue = NA
    data_gaps: list[str] = []
    recommendation: BankRecommendation = BankRecommendation()
