"""Unit tests for the allocation domain service (pure functions)."""

import random

import pytest

from advisor_api.domain.constants import (
    ALLOCATION_POLICY,
    PROFILE_ELIGIBLE_TIERS,
    REASONING_TEXT,
    RECOMMENDATION_TEXT,
)
from advisor_api.domain.entities import (
    AllocationRequest,
    Instrument,
    InstrumentKind,
    InstrumentTypeFilter,
    Recommendation,
    RiskLabel,
    RiskProfile,
    RiskTier,
)
from advisor_api.domain.services import (
    allocate,
    classify_risk_score,
    compute_risk_score,
    compute_total_return,
    filter_eligible,
    partition_by_tier,
)


def _inst(
    inst_id: str,
    tier: RiskTier,
    change_percent: float = 0.0,
    kind: InstrumentKind = InstrumentKind.EQUITY,
    recommendation: Recommendation = Recommendation.BUY,
) -> Instrument:
    return Instrument(
        id=inst_id,
        name=inst_id.upper(),
        kind=kind,
        current_price=100.0,
        change_24h=change_percent,
        change_percent=change_percent,
        risk_tier=tier,
        recommendation=recommendation,
    )


def _random_pool(rng: random.Random, size: int) -> list[Instrument]:
    return [
        _inst(
            f"i{i}",
            rng.choice(list(RiskTier)),
            change_percent=round(rng.uniform(-10, 10), 2),
            kind=rng.choice(list(InstrumentKind)),
            recommendation=rng.choice(list(Recommendation)),
        )
        for i in range(size)
    ]


MIXED_POOL = [
    _inst("low1", RiskTier.LOW, 2.0, InstrumentKind.FIXED_INCOME),
    _inst("med1", RiskTier.MEDIUM, 1.0, InstrumentKind.EQUITY),
    _inst("high1", RiskTier.HIGH, 5.0, InstrumentKind.DIGITAL_ASSET),
    _inst("low2", RiskTier.LOW, 0.5, InstrumentKind.FUND),
    _inst("high2", RiskTier.HIGH, -3.0, InstrumentKind.FUND),
]


class TestFilterEligible:
    """Tests for filter_eligible."""

    def test_excludes_sell(self):
        pool = [
            _inst("a", RiskTier.LOW, recommendation=Recommendation.SELL),
            _inst("b", RiskTier.LOW, recommendation=Recommendation.HOLD),
        ]
        eligible = filter_eligible(pool, RiskProfile.AGGRESSIVE)
        assert [i.id for i in eligible] == ["b"]

    def test_conservative_admits_low_and_medium(self):
        eligible = filter_eligible(MIXED_POOL, RiskProfile.CONSERVATIVE)
        assert {i.risk_tier for i in eligible} == {RiskTier.LOW, RiskTier.MEDIUM}

    def test_eligible_tiers_follow_policy(self):
        assert PROFILE_ELIGIBLE_TIERS == {
            RiskProfile.CONSERVATIVE: {RiskTier.LOW, RiskTier.MEDIUM},
            RiskProfile.MODERATE: {RiskTier.LOW, RiskTier.MEDIUM, RiskTier.HIGH},
            RiskProfile.AGGRESSIVE: {RiskTier.LOW, RiskTier.MEDIUM, RiskTier.HIGH},
        }

    def test_moderate_admits_high_tier(self):
        """Moderate reaches the high tier so its 20% high slice can be filled."""
        eligible = filter_eligible(MIXED_POOL, RiskProfile.MODERATE)
        assert [i.id for i in eligible] == [i.id for i in MIXED_POOL]

    def test_aggressive_admits_all_tiers(self):
        eligible = filter_eligible(MIXED_POOL, RiskProfile.AGGRESSIVE)
        assert len(eligible) == len(MIXED_POOL)

    def test_type_filter_restricts_kind(self):
        eligible = filter_eligible(
            MIXED_POOL, RiskProfile.AGGRESSIVE, InstrumentTypeFilter.FUND
        )
        assert [i.id for i in eligible] == ["low2", "high2"]

    def test_preserves_catalog_order(self):
        eligible = filter_eligible(MIXED_POOL, RiskProfile.AGGRESSIVE)
        assert [i.id for i in eligible] == [i.id for i in MIXED_POOL]


class TestPartitionByTier:
    """Tests for partition_by_tier."""

    def test_groups_and_keeps_order(self):
        tiers = partition_by_tier(MIXED_POOL)
        assert [i.id for i in tiers[RiskTier.LOW]] == ["low1", "low2"]
        assert [i.id for i in tiers[RiskTier.MEDIUM]] == ["med1"]
        assert [i.id for i in tiers[RiskTier.HIGH]] == ["high1", "high2"]

    def test_empty_input_gives_empty_tiers(self):
        tiers = partition_by_tier([])
        assert all(tiers[tier] == [] for tier in RiskTier)


class TestModerateProfile:
    """Moderate: 40/40/20, first instrument of each tier."""

    def test_ample_pool_scenario(self):
        pool = [
            _inst("low", RiskTier.LOW, 2.0),
            _inst("med", RiskTier.MEDIUM, 1.0),
            _inst("high", RiskTier.HIGH, 5.0),
        ]
        result = allocate(AllocationRequest(amount=10000, risk_profile=RiskProfile.MODERATE), pool)

        assert [line.instrument.id for line in result.lines] == ["low", "med", "high"]
        assert [line.percentage for line in result.lines] == [40, 40, 20]
        assert [line.amount for line in result.lines] == pytest.approx([4000, 4000, 2000])
        assert result.total_return == pytest.approx(2.2)
        assert result.risk_score == pytest.approx(1.8)
        assert classify_risk_score(result.risk_score) == RiskLabel.MODERATE

    def test_only_first_instrument_per_tier(self):
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.MODERATE), MIXED_POOL
        )
        assert [line.instrument.id for line in result.lines] == ["low1", "med1", "high1"]

    def test_missing_tier_is_not_redistributed(self):
        pool = [_inst("low", RiskTier.LOW), _inst("high", RiskTier.HIGH)]
        result = allocate(AllocationRequest(amount=1000, risk_profile=RiskProfile.MODERATE), pool)

        assert [line.percentage for line in result.lines] == [40, 20]
        assert result.total_percentage == pytest.approx(60)


class TestConservativeProfile:
    """Conservative: 70% low split over all, 30% medium with a 1-2 cutoff."""

    def test_no_medium_candidates(self):
        pool = [_inst("low1", RiskTier.LOW), _inst("low2", RiskTier.LOW)]
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.CONSERVATIVE), pool
        )

        assert len(result.lines) == 2
        assert [line.percentage for line in result.lines] == pytest.approx([35, 35])
        assert result.total_percentage == pytest.approx(70)

    def test_single_medium_gets_full_mass(self):
        pool = [_inst("low", RiskTier.LOW), _inst("med", RiskTier.MEDIUM)]
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.CONSERVATIVE), pool
        )

        assert [line.percentage for line in result.lines] == pytest.approx([70, 30])
        assert result.total_percentage == pytest.approx(100)

    def test_two_medium_only_first_takes_half_mass(self):
        pool = [
            _inst("low", RiskTier.LOW),
            _inst("med1", RiskTier.MEDIUM),
            _inst("med2", RiskTier.MEDIUM),
        ]
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.CONSERVATIVE), pool
        )

        assert [line.instrument.id for line in result.lines] == ["low", "med1"]
        assert result.lines[1].percentage == pytest.approx(15)

    def test_three_medium_omits_medium_mass(self):
        pool = [_inst("low", RiskTier.LOW)] + [
            _inst(f"med{i}", RiskTier.MEDIUM) for i in range(3)
        ]
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.CONSERVATIVE), pool
        )

        assert [line.instrument.id for line in result.lines] == ["low"]
        assert result.total_percentage == pytest.approx(70)

    def test_never_allocates_high(self):
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.CONSERVATIVE), MIXED_POOL
        )
        assert all(line.instrument.risk_tier != RiskTier.HIGH for line in result.lines)


class TestAggressiveProfile:
    """Aggressive: 20% low, 30% medium, 50% over the first two high."""

    def test_three_high_candidates(self):
        pool = [_inst(f"high{i}", RiskTier.HIGH) for i in range(3)]
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.AGGRESSIVE), pool
        )

        assert [line.instrument.id for line in result.lines] == ["high0", "high1"]
        assert [line.percentage for line in result.lines] == pytest.approx([25, 25])

    def test_single_high_takes_full_high_mass(self):
        pool = [_inst("high", RiskTier.HIGH)]
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.AGGRESSIVE), pool
        )
        assert result.lines[0].percentage == pytest.approx(50)

    def test_full_pool_sums_to_100(self):
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.AGGRESSIVE), MIXED_POOL
        )

        assert [line.percentage for line in result.lines] == pytest.approx([20, 30, 25, 25])
        assert result.total_percentage == pytest.approx(100)
        assert result.risk_score == pytest.approx(0.2 * 1 + 0.3 * 2 + 0.5 * 3)


class TestEdgeCases:
    """Degenerate inputs never raise."""

    @pytest.mark.parametrize("profile", list(RiskProfile))
    def test_empty_pool(self, profile):
        result = allocate(AllocationRequest(amount=5000, risk_profile=profile), [])

        assert result.lines == []
        assert result.total_return == 0
        assert result.risk_score == 0
        assert result.recommendation_text == RECOMMENDATION_TEXT[profile]

    def test_all_sell(self):
        pool = [_inst("a", RiskTier.LOW, recommendation=Recommendation.SELL)]
        result = allocate(AllocationRequest(amount=5000), pool)
        assert result.lines == []

    def test_filter_with_no_matches(self):
        result = allocate(
            AllocationRequest(
                amount=5000, instrument_type_filter=InstrumentTypeFilter.DIGITAL_ASSET
            ),
            [_inst("a", RiskTier.LOW, kind=InstrumentKind.FUND)],
        )
        assert result.lines == []

    def test_filter_all_equals_default(self):
        explicit = allocate(
            AllocationRequest(
                amount=5000,
                risk_profile=RiskProfile.AGGRESSIVE,
                instrument_type_filter=InstrumentTypeFilter.ALL,
            ),
            MIXED_POOL,
        )
        default = allocate(
            AllocationRequest(amount=5000, risk_profile=RiskProfile.AGGRESSIVE), MIXED_POOL
        )
        assert explicit == default


class TestReasoningAndRecommendation:
    """Canned texts come from the lookup tables."""

    def test_reasoning_per_profile_and_tier(self):
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.AGGRESSIVE), MIXED_POOL
        )
        for line in result.lines:
            key = (RiskProfile.AGGRESSIVE, line.instrument.risk_tier)
            assert line.reasoning == REASONING_TEXT[key]

    def test_every_policy_tier_has_reasoning(self):
        for profile, policies in ALLOCATION_POLICY.items():
            for policy in policies:
                assert (profile, policy.tier) in REASONING_TEXT

    def test_reasoning_texts_are_distinct(self):
        assert len(set(REASONING_TEXT.values())) == len(REASONING_TEXT)

    def test_recommendation_independent_of_pool(self):
        full = allocate(AllocationRequest(amount=1, risk_profile=RiskProfile.MODERATE), MIXED_POOL)
        empty = allocate(AllocationRequest(amount=1, risk_profile=RiskProfile.MODERATE), [])
        assert full.recommendation_text == empty.recommendation_text


class TestAllocationProperties:
    """Invariants checked over seeded random pools."""

    @pytest.mark.parametrize("seed", range(20))
    def test_invariants(self, seed):
        rng = random.Random(seed)
        pool = _random_pool(rng, rng.randint(0, 12))
        profile = rng.choice(list(RiskProfile))
        type_filter = rng.choice(list(InstrumentTypeFilter))
        request = AllocationRequest(
            amount=rng.uniform(1, 100_000),
            risk_profile=profile,
            instrument_type_filter=type_filter,
        )

        result = allocate(request, pool)
        mass = result.total_percentage

        # Determinism
        assert allocate(request, pool) == result
        # Mass bound
        assert mass <= 100 + 1e-9
        assert all(line.percentage >= 0 for line in result.lines)
        # Risk-score bound
        assert mass / 100 - 1e-9 <= result.risk_score <= 3 * mass / 100 + 1e-9
        # Exclusion law
        assert all(
            line.instrument.recommendation != Recommendation.SELL for line in result.lines
        )
        # Tier eligibility
        if profile == RiskProfile.CONSERVATIVE:
            assert all(
                line.instrument.risk_tier in (RiskTier.LOW, RiskTier.MEDIUM)
                for line in result.lines
            )
        if profile == RiskProfile.MODERATE:
            # at most one line per tier, high included at 20%
            tiers = [line.instrument.risk_tier for line in result.lines]
            assert len(tiers) == len(set(tiers))
            assert all(
                line.percentage == pytest.approx(20)
                for line in result.lines
                if line.instrument.risk_tier == RiskTier.HIGH
            )
        # Kind filter
        if type_filter != InstrumentTypeFilter.ALL:
            assert all(
                line.instrument.kind.value == type_filter.value for line in result.lines
            )
        # Amounts follow percentages
        for line in result.lines:
            assert line.amount == pytest.approx(request.amount * line.percentage / 100)


class TestAggregates:
    """Tests for compute_total_return and compute_risk_score."""

    def test_empty_lines(self):
        assert compute_total_return([]) == 0
        assert compute_risk_score([]) == 0

    def test_negative_returns_are_signed(self):
        pool = [_inst("high", RiskTier.HIGH, -4.0)]
        result = allocate(
            AllocationRequest(amount=1000, risk_profile=RiskProfile.AGGRESSIVE), pool
        )
        assert compute_total_return(result.lines) == pytest.approx(-2.0)
        assert compute_risk_score(result.lines) == pytest.approx(1.5)


class TestClassifyRiskScore:
    """Tests for classify_risk_score boundaries."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (-1.0, RiskLabel.LOW),
            (0.0, RiskLabel.LOW),
            (1.0, RiskLabel.LOW),
            (1.4999, RiskLabel.LOW),
            (1.5, RiskLabel.MODERATE),
            (2.0, RiskLabel.MODERATE),
            (2.4999, RiskLabel.MODERATE),
            (2.5, RiskLabel.HIGH),
            (3.0, RiskLabel.HIGH),
            (10.0, RiskLabel.HIGH),
        ],
    )
    def test_thresholds(self, score, expected):
        assert classify_risk_score(score) == expected
