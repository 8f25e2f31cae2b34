"""Portfolio allocation endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from advisor_api.core.analysis import AnalysisSession
from advisor_api.core.config import get_default_currency
from advisor_api.core.currency import format_currency
from advisor_api.domain.entities import (
    AllocationRequest,
    AllocationResult,
    Currency,
    Instrument,
    InstrumentTypeFilter,
    RiskLabel,
    RiskProfile,
)
from advisor_api.domain.exceptions import AnalysisInProgressError
from advisor_api.domain.services import classify_risk_score
from advisor_api.routes.catalog import InstrumentModel
from advisor_api.routes.dependencies import (
    get_analysis_session,
    get_catalog,
    get_profile_store,
)
from advisor_api.storage import LocalProfileStore, resolve_risk_profile

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request / Response models
# ============================================================================


class AnalyzeRequest(BaseModel):
    """Request model for the allocation endpoint."""

    amount: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Capital to allocate, in the base currency (BRL)",
    )
    risk_profile: RiskProfile | None = Field(
        None,
        description="Risk profile. Defaults to the stored profile, then 'moderate'.",
    )
    instrument_type: InstrumentTypeFilter = Field(
        InstrumentTypeFilter.ALL,
        description="Restrict allocation to one instrument kind",
    )
    currency: Currency | None = Field(
        None,
        description="Display currency for formatted amounts. Defaults to the profile's.",
    )


class AllocationLineModel(BaseModel):
    """A single allocation line."""

    instrument: InstrumentModel
    percentage: float = Field(..., ge=0, le=100, description="Share of the amount (0-100)")
    amount: float = Field(..., ge=0, description="Allocated amount in the base currency")
    formatted_amount: str = Field(..., description="Amount converted to the display currency")
    reasoning: str


class AnalyzeResponse(BaseModel):
    """Response model for the allocation endpoint."""

    lines: list[AllocationLineModel]
    total_return: float = Field(..., description="Weighted percentage change")
    risk_score: float = Field(..., description="Weighted tier value (1.0-3.0 at full mass)")
    risk_label: RiskLabel
    total_percentage: float = Field(..., description="Allocated mass; below 100 when tiers are empty")
    recommendation: str
    risk_profile: RiskProfile
    currency: Currency


class RiskLabelResponse(BaseModel):
    score: float
    label: RiskLabel


def build_analyze_response(
    result: AllocationResult,
    risk_profile: RiskProfile,
    currency: Currency,
) -> AnalyzeResponse:
    """Convert an AllocationResult into the API response."""
    return AnalyzeResponse(
        lines=[
            AllocationLineModel(
                instrument=InstrumentModel(**line.instrument.to_dict()),
                percentage=line.percentage,
                amount=line.amount,
                formatted_amount=format_currency(line.amount, currency),
                reasoning=line.reasoning,
            )
            for line in result.lines
        ],
        total_return=result.total_return,
        risk_score=result.risk_score,
        risk_label=classify_risk_score(result.risk_score),
        total_percentage=result.total_percentage,
        recommendation=result.recommendation_text,
        risk_profile=risk_profile,
        currency=currency,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(
    request: AnalyzeRequest,
    store: LocalProfileStore = Depends(get_profile_store),
    catalog: list[Instrument] = Depends(get_catalog),
    session: AnalysisSession = Depends(get_analysis_session),
) -> AnalyzeResponse:
    """Allocate an amount across the catalog for a risk profile.

    The profile comes from the request, else from the stored user profile,
    else 'moderate'. Instruments flagged 'sell' are never allocated.
    Allocated percentages may total less than 100 when the catalog has no
    eligible instrument for a tier; they are not renormalized.

    Raises:
        HTTPException 409: if another analysis is still running
    """
    profile = store.load_profile()
    risk_profile = request.risk_profile or resolve_risk_profile(profile)
    currency = request.currency or (
        profile.preferred_currency if profile else get_default_currency()
    )

    allocation_request = AllocationRequest(
        amount=request.amount,
        risk_profile=risk_profile,
        instrument_type_filter=request.instrument_type,
    )
    try:
        result = session.run(allocation_request, catalog)
    except AnalysisInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e

    return build_analyze_response(result, risk_profile, currency)


@router.get("/risk-label", response_model=RiskLabelResponse)
def risk_label(
    score: float = Query(..., allow_inf_nan=False, description="Aggregate risk score"),
) -> RiskLabelResponse:
    """Classify a risk score as low (< 1.5), moderate (< 2.5) or high."""
    return RiskLabelResponse(score=score, label=classify_risk_score(score))
