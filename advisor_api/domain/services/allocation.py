"""Rule-based portfolio allocation domain service.

Allocates a requested amount across catalog instruments using a fixed
per-profile policy table:
1. Drop instruments flagged "sell" and those outside the profile's tiers
2. Partition the survivors by risk tier (catalog order preserved)
3. Hand each tier its policy mass, split over the selected instruments
4. Score the allocation (weighted return and weighted risk)

All functions are pure: no I/O, no shared state, and no exceptions for
empty pools or empty tiers.
"""

from collections.abc import Iterable, Sequence

from advisor_api.domain.constants import (
    ALLOCATION_POLICY,
    PROFILE_ELIGIBLE_TIERS,
    REASONING_TEXT,
    RECOMMENDATION_TEXT,
    RISK_LABEL_HIGH_THRESHOLD,
    RISK_LABEL_LOW_THRESHOLD,
    TIER_RISK_VALUE,
)
from advisor_api.domain.entities.allocation import (
    AllocationLine,
    AllocationRequest,
    AllocationResult,
    Instrument,
    InstrumentTypeFilter,
    Recommendation,
    RiskLabel,
    RiskProfile,
    RiskTier,
    TierPolicy,
)


def filter_eligible(
    pool: Iterable[Instrument],
    risk_profile: RiskProfile,
    type_filter: InstrumentTypeFilter = InstrumentTypeFilter.ALL,
) -> list[Instrument]:
    """Return the instruments a profile may receive, in catalog order.

    Args:
        pool: Candidate instruments
        risk_profile: Profile whose eligible tiers apply
        type_filter: Instrument kind to keep, or ALL

    Returns:
        Instruments not flagged "sell", in an eligible tier, and of the
        requested kind
    """
    allowed_tiers = PROFILE_ELIGIBLE_TIERS[risk_profile]
    eligible = [
        inst
        for inst in pool
        if inst.recommendation != Recommendation.SELL
        and inst.risk_tier in allowed_tiers
    ]
    if type_filter != InstrumentTypeFilter.ALL:
        eligible = [inst for inst in eligible if inst.kind.value == type_filter.value]
    return eligible


def partition_by_tier(
    instruments: Iterable[Instrument],
) -> dict[RiskTier, list[Instrument]]:
    """Group instruments by risk tier, keeping their relative order."""
    tiers: dict[RiskTier, list[Instrument]] = {tier: [] for tier in RiskTier}
    for inst in instruments:
        tiers[inst.risk_tier].append(inst)
    return tiers


def _select_for_tier(
    policy: TierPolicy,
    candidates: Sequence[Instrument],
) -> tuple[list[Instrument], float]:
    """Pick the instruments of one tier and the percentage each receives.

    Returns an empty selection when the candidate count is out of the
    policy's bounds; the tier's mass is then dropped, not redistributed.
    """
    count = len(candidates)
    if count < max(policy.min_candidates, 1):
        return [], 0.0
    if policy.max_candidates is not None and count > policy.max_candidates:
        return [], 0.0

    if policy.max_selected is None:
        selected = list(candidates)
    else:
        selected = list(candidates[: policy.max_selected])

    divisor = len(selected) if policy.divide_by_selected else count
    return selected, policy.mass_pct / divisor


def assign_weights(
    tiers: dict[RiskTier, list[Instrument]],
    risk_profile: RiskProfile,
    amount: float,
) -> list[AllocationLine]:
    """Apply the profile's policy table to tiered instruments.

    Args:
        tiers: Output of partition_by_tier
        risk_profile: Profile selecting the policy
        amount: Capital to allocate

    Returns:
        Allocation lines in policy tier order
    """
    lines: list[AllocationLine] = []
    for policy in ALLOCATION_POLICY[risk_profile]:
        selected, percentage = _select_for_tier(policy, tiers.get(policy.tier, []))
        reasoning = REASONING_TEXT[(risk_profile, policy.tier)]
        for inst in selected:
            lines.append(
                AllocationLine(
                    instrument=inst,
                    percentage=percentage,
                    amount=amount * percentage / 100,
                    reasoning=reasoning,
                )
            )
    return lines


def compute_total_return(lines: Iterable[AllocationLine]) -> float:
    """Allocation-weighted percentage change (linear, not compounded)."""
    return sum(
        line.percentage * line.instrument.change_percent / 100 for line in lines
    )


def compute_risk_score(lines: Iterable[AllocationLine]) -> float:
    """Allocation-weighted tier value.

    Ranges over [1.0, 3.0] for a full allocation and scales down with the
    allocated mass.
    """
    return sum(
        line.percentage * TIER_RISK_VALUE[line.instrument.risk_tier] / 100
        for line in lines
    )


def classify_risk_score(score: float) -> RiskLabel:
    """Map a risk score to a qualitative label.

    Returns:
        LOW if score < 1.5
        MODERATE if 1.5 <= score < 2.5
        HIGH otherwise
    """
    if score < RISK_LABEL_LOW_THRESHOLD:
        return RiskLabel.LOW
    elif score < RISK_LABEL_HIGH_THRESHOLD:
        return RiskLabel.MODERATE
    return RiskLabel.HIGH


def allocate(
    request: AllocationRequest,
    pool: Sequence[Instrument],
) -> AllocationResult:
    """Allocate the requested amount across the pool.

    This is a pure function: identical inputs always give an identical
    result. The allocated mass is never renormalized, so it totals less
    than 100 when a tier the policy needs has no eligible instrument.

    Args:
        request: Validated amount, profile and kind filter
        pool: Catalog snapshot, read only

    Returns:
        AllocationResult with lines, total return, risk score and the
        profile's recommendation text
    """
    eligible = filter_eligible(
        pool, request.risk_profile, request.instrument_type_filter
    )
    tiers = partition_by_tier(eligible)
    lines = assign_weights(tiers, request.risk_profile, request.amount)

    return AllocationResult(
        lines=lines,
        total_return=compute_total_return(lines),
        risk_score=compute_risk_score(lines),
        recommendation_text=RECOMMENDATION_TEXT[request.risk_profile],
    )
