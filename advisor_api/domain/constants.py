"""Domain constants for advisor_api.

This module centralizes the allocation policy, the canned texts shown next
to an allocation and the display tables, so the scoring code never carries
magic numbers or inline strings.
"""

from advisor_api.domain.entities.allocation import (
    RiskProfile,
    RiskTier,
    TierPolicy,
)
from advisor_api.domain.entities.profile import Currency

# ============================================================================
# Allocation policy
# ============================================================================

# Profile used when no stored profile exists
DEFAULT_RISK_PROFILE = RiskProfile.MODERATE

# Per-profile tier policy, in the order lines are emitted.
# Masses are percentage points of the requested amount.
ALLOCATION_POLICY: dict[RiskProfile, tuple[TierPolicy, ...]] = {
    RiskProfile.CONSERVATIVE: (
        TierPolicy(RiskTier.LOW, mass_pct=70.0, max_selected=None),
        # Only taken with 1-2 candidates; the mass is split by the candidate
        # count but only the first candidate receives its share.
        TierPolicy(
            RiskTier.MEDIUM,
            mass_pct=30.0,
            max_selected=1,
            max_candidates=2,
            divide_by_selected=False,
        ),
    ),
    RiskProfile.MODERATE: (
        TierPolicy(RiskTier.LOW, mass_pct=40.0),
        TierPolicy(RiskTier.MEDIUM, mass_pct=40.0),
        TierPolicy(RiskTier.HIGH, mass_pct=20.0),
    ),
    RiskProfile.AGGRESSIVE: (
        TierPolicy(RiskTier.LOW, mass_pct=20.0),
        TierPolicy(RiskTier.MEDIUM, mass_pct=30.0),
        TierPolicy(RiskTier.HIGH, mass_pct=50.0, max_selected=2),
    ),
}

# Tiers that survive the eligibility filter: every tier the profile's
# policy allocates to.
PROFILE_ELIGIBLE_TIERS: dict[RiskProfile, frozenset[RiskTier]] = {
    profile: frozenset(policy.tier for policy in policies)
    for profile, policies in ALLOCATION_POLICY.items()
}

# Numeric weight of each tier in the aggregate risk score
TIER_RISK_VALUE: dict[RiskTier, int] = {
    RiskTier.LOW: 1,
    RiskTier.MEDIUM: 2,
    RiskTier.HIGH: 3,
}


# ============================================================================
# Risk label thresholds
# ============================================================================

# score < 1.5 = low, 1.5 <= score < 2.5 = moderate, otherwise high
RISK_LABEL_LOW_THRESHOLD = 1.5
RISK_LABEL_HIGH_THRESHOLD = 2.5


# ============================================================================
# Canned texts
# ============================================================================

REASONING_TEXT: dict[tuple[RiskProfile, RiskTier], str] = {
    (RiskProfile.CONSERVATIVE, RiskTier.LOW): (
        "Low-risk investment with stable and secure returns."
    ),
    (RiskProfile.CONSERVATIVE, RiskTier.MEDIUM): (
        "Diversification with moderate risk for growth potential."
    ),
    (RiskProfile.MODERATE, RiskTier.LOW): "Solid base with a low-risk investment.",
    (RiskProfile.MODERATE, RiskTier.MEDIUM): "Balance between safety and growth.",
    (RiskProfile.MODERATE, RiskTier.HIGH): "High return potential with controlled risk.",
    (RiskProfile.AGGRESSIVE, RiskTier.LOW): "Safety reserve to protect capital.",
    (RiskProfile.AGGRESSIVE, RiskTier.MEDIUM): "Consistent growth with moderate risk.",
    (RiskProfile.AGGRESSIVE, RiskTier.HIGH): "Maximum return potential with elevated risk.",
}

RECOMMENDATION_TEXT: dict[RiskProfile, str] = {
    RiskProfile.CONSERVATIVE: (
        "Portfolio focused on safety and capital preservation with stable returns."
    ),
    RiskProfile.MODERATE: (
        "Portfolio balanced between safety and growth, ideal for medium-term goals."
    ),
    RiskProfile.AGGRESSIVE: (
        "Portfolio optimized for maximum growth, suited to investors "
        "with a high tolerance for risk."
    ),
}


# ============================================================================
# Display constants
# ============================================================================

CURRENCY_SYMBOLS: dict[Currency, str] = {
    Currency.BRL: "R$",
    Currency.USD: "$",
    Currency.EUR: "€",
}

# Fixed display rates from the base currency (BRL). Not market rates.
CURRENCY_RATES: dict[Currency, float] = {
    Currency.BRL: 1.0,
    Currency.USD: 0.20,
    Currency.EUR: 0.18,
}
