"""API request validation utilities."""
import logging
import re

from fastapi import HTTPException

from bank_health.schemas.bank import BankAnalysis

logger = logging.getLogger(__name__)

_BANK_TICKER = re.compile(r"[A-Z]{1,5}(?:[.\-][A-Z]{1,2})?")


def validate_ticker(ticker: str) -> str:
    """Normalize a listed bank ticker: a root symbol plus an optional share-class
    or preferred-series suffix (JPM, BRK.B, BAC-PL).

    Raises:
        HTTPException: 400 if the ticker is empty or not of that shape
    """
    ticker = (ticker or "").strip().upper()
    if not ticker:
        raise HTTPException(status_code=400, detail="Ticker cannot be empty")

    if not _BANK_TICKER.fullmatch(ticker):
        logger.info(f"Rejected ticker '{ticker}'")
        raise HTTPException(
            status_code=400,
            detail=f"Invalid bank ticker: '{ticker}'. Expected 1-5 letters with an optional .X or -XX suffix.",
        )
    return ticker


def ensure_enough_data(analysis: BankAnalysis, min_available: int) -> None:
    """Reject analyses built from too sparse a snapshot.

    The engine always produces a recommendation; whether one built mostly from
    neutral defaults is worth presenting is decided here.
    """
    scored = len(analysis.recommendation.breakdown)
    available = scored - len(analysis.data_gaps)
    if available < min_available:
        logger.warning(f"{analysis.ticker}: only {available}/{scored} scored metrics available")
        raise HTTPException(
            status_code=422,
            detail=f"Insufficient data for '{analysis.ticker}': {available} of {scored} metrics available",
        )
