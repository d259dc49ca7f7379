from fastapi import APIRouter, Depends

from bank_health.analysis.bank_analyzer import analyze_bank
from bank_health.analysis.recommendation_engine import aggregate
from bank_health.analysis.sector_benchmarks import BANK_BENCHMARKS
from bank_health.api.validation import ensure_enough_data, validate_ticker
from bank_health.config import Settings, get_settings
from bank_health.schemas.bank import BankAnalysis, BankRecommendation, BankSnapshot, RecommendationRequest

router = APIRouter(prefix="/api/banks", tags=["banks"])


@router.get("/benchmarks", response_model=dict[str, float])
async def get_benchmarks():
    return BANK_BENCHMARKS


@router.post("/recommendation", response_model=BankRecommendation)
async def post_recommendation(request: RecommendationRequest):
    return aggregate(request.safety_metrics, request.profitability_metrics, request.current_price)


@router.post("/{ticker}/analysis", response_model=BankAnalysis)
async def post_bank_analysis(
    ticker: str,
    snapshot: BankSnapshot,
    settings: Settings = Depends(get_settings),
):
    ticker = validate_ticker(ticker)
    snapshot = snapshot.model_copy(update={"ticker": ticker})
    analysis = analyze_bank(snapshot, settings.history_periods)
    ensure_enough_data(analysis, settings.min_available_metrics)
    return analysis
