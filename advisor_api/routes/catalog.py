"""Instrument catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from advisor_api.catalog import filter_by_type, get_instrument
from advisor_api.domain.entities import (
    Instrument,
    InstrumentKind,
    InstrumentTypeFilter,
    Recommendation,
    RiskTier,
)
from advisor_api.domain.exceptions import DataNotFoundError
from advisor_api.routes.dependencies import get_catalog

router = APIRouter()


class InstrumentModel(BaseModel):
    """An instrument as exposed by the API."""

    id: str
    name: str
    kind: InstrumentKind
    current_price: float = Field(..., gt=0, description="Price in the native currency")
    change_24h: float = Field(..., description="Absolute price change over 24h")
    change_percent: float = Field(..., description="Percentage change over 24h")
    risk_tier: RiskTier
    recommendation: Recommendation


class CatalogResponse(BaseModel):
    instruments: list[InstrumentModel]
    total: int


@router.get("", response_model=CatalogResponse)
def list_instruments(
    instrument_type: InstrumentTypeFilter = InstrumentTypeFilter.ALL,
    catalog: list[Instrument] = Depends(get_catalog),
) -> CatalogResponse:
    """List catalog instruments in catalog order, optionally by kind."""
    instruments = filter_by_type(catalog, instrument_type)
    return CatalogResponse(
        instruments=[InstrumentModel(**inst.to_dict()) for inst in instruments],
        total=len(instruments),
    )


@router.get("/{instrument_id}", response_model=InstrumentModel)
def read_instrument(
    instrument_id: str,
    catalog: list[Instrument] = Depends(get_catalog),
) -> InstrumentModel:
    """Get one instrument by id.

    Raises:
        HTTPException 404: if the id is not in the catalog
    """
    try:
        inst = get_instrument(catalog, instrument_id)
    except DataNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return InstrumentModel(**inst.to_dict())
