"""User profile endpoints (onboarding result storage)."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from advisor_api.domain.entities import Currency, RiskProfile, UserProfile
from advisor_api.domain.entities.profile import RISK_TOLERANCE_MAX, RISK_TOLERANCE_MIN
from advisor_api.routes.dependencies import get_profile_store
from advisor_api.storage import LocalProfileStore

logger = logging.getLogger(__name__)

router = APIRouter()


class ProfileModel(BaseModel):
    """Investor profile as submitted by onboarding."""

    name: str = Field(..., min_length=1, description="Display name")
    risk_profile: RiskProfile = Field(RiskProfile.MODERATE, description="Declared risk appetite")
    investment_goal: float = Field(
        10000,
        gt=0,
        allow_inf_nan=False,
        description="Investment goal in the base currency (BRL)",
    )
    risk_tolerance: int = Field(
        5,
        ge=RISK_TOLERANCE_MIN,
        le=RISK_TOLERANCE_MAX,
        description="Self-reported tolerance (1-10); informational only",
    )
    preferred_currency: Currency = Field(Currency.BRL, description="Display currency")

    def to_entity(self) -> UserProfile:
        return UserProfile(
            name=self.name,
            risk_profile=self.risk_profile,
            investment_goal=self.investment_goal,
            risk_tolerance=self.risk_tolerance,
            preferred_currency=self.preferred_currency,
        )


@router.get("", response_model=ProfileModel)
def read_profile(store: LocalProfileStore = Depends(get_profile_store)) -> ProfileModel:
    """Get the stored profile.

    Raises:
        HTTPException 404: if onboarding has not been completed
    """
    profile = store.load_profile()
    if profile is None:
        raise HTTPException(status_code=404, detail="No profile stored")
    return ProfileModel(**profile.to_dict())


@router.put("", response_model=ProfileModel)
def save_profile(
    profile: ProfileModel,
    store: LocalProfileStore = Depends(get_profile_store),
) -> ProfileModel:
    """Store the profile, replacing any previous one."""
    store.save_profile(profile.to_entity())
    return profile


@router.delete("")
def delete_profile(store: LocalProfileStore = Depends(get_profile_store)) -> dict:
    """Remove the stored profile (allocation then falls back to 'moderate')."""
    return {"deleted": store.delete_profile()}
