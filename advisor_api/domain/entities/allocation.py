"""Allocation-related domain entities."""

import math
from dataclasses import dataclass, field
from enum import Enum


class RiskTier(str, Enum):
    """Coarse volatility label carried by every instrument."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskProfile(str, Enum):
    """Risk appetite declared by the user during onboarding."""

    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class InstrumentKind(str, Enum):
    """Instrument asset class."""

    EQUITY = "equity"
    FIXED_INCOME = "fixed-income"
    DIGITAL_ASSET = "digital-asset"
    FUND = "fund"


class InstrumentTypeFilter(str, Enum):
    """Kind filter applied to the catalog before allocation."""

    ALL = "all"
    EQUITY = "equity"
    FIXED_INCOME = "fixed-income"
    DIGITAL_ASSET = "digital-asset"
    FUND = "fund"


class Recommendation(str, Enum):
    """Catalog recommendation flag."""

    BUY = "buy"
    HOLD = "hold"
    SELL = "sell"


class RiskLabel(str, Enum):
    """Qualitative classification of an aggregate risk score."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


@dataclass(frozen=True)
class TierPolicy:
    """How one risk tier receives capital under a given profile.

    The first ``max_selected`` candidates of the tier (``None`` selects all
    of them) share ``mass_pct`` evenly. With ``divide_by_selected=False`` the
    mass is divided by the candidate count instead, so fewer percentage
    points than ``mass_pct`` may end up allocated. The tier is skipped when
    its candidate count falls outside ``[min_candidates, max_candidates]``.
    """

    tier: RiskTier
    mass_pct: float
    max_selected: int | None = 1
    min_candidates: int = 1
    max_candidates: int | None = None
    divide_by_selected: bool = True


@dataclass(frozen=True)
class Instrument:
    """An investable instrument from the catalog."""

    id: str
    name: str
    kind: InstrumentKind
    current_price: float  # native currency
    change_24h: float  # absolute price delta
    change_percent: float  # percentage delta, e.g. 2.5 for +2.5%
    risk_tier: RiskTier
    recommendation: Recommendation

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "current_price": self.current_price,
            "change_24h": self.change_24h,
            "change_percent": self.change_percent,
            "risk_tier": self.risk_tier.value,
            "recommendation": self.recommendation.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Instrument":
        """Build an instrument from its dictionary form.

        Raises:
            KeyError: if a required key is missing
            ValueError: if an enum value is not recognised, the price is
                not positive, or a number is not finite
        """
        current_price = float(data["current_price"])
        change_24h = float(data["change_24h"])
        change_percent = float(data["change_percent"])
        if not all(math.isfinite(v) for v in (current_price, change_24h, change_percent)):
            raise ValueError(f"Non-finite price data for instrument {data['id']}")
        if current_price <= 0:
            raise ValueError(
                f"Price must be positive for instrument {data['id']}, got {current_price}"
            )
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            kind=InstrumentKind(data["kind"]),
            current_price=current_price,
            change_24h=change_24h,
            change_percent=change_percent,
            risk_tier=RiskTier(data["risk_tier"]),
            recommendation=Recommendation(data["recommendation"]),
        )


@dataclass
class AllocationRequest:
    """Parameters of a single analysis run.

    The amount must already be validated (positive and finite) by the caller.
    """

    amount: float
    risk_profile: RiskProfile = RiskProfile.MODERATE
    instrument_type_filter: InstrumentTypeFilter = InstrumentTypeFilter.ALL


@dataclass
class AllocationLine:
    """One instrument's share of the requested capital."""

    instrument: Instrument
    percentage: float  # 0-100
    amount: float  # request.amount * percentage / 100
    reasoning: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "instrument": self.instrument.to_dict(),
            "percentage": self.percentage,
            "amount": self.amount,
            "reasoning": self.reasoning,
        }


@dataclass
class AllocationResult:
    """Result of an allocation run."""

    # Ordered by tier (low, medium, high), catalog order within a tier
    lines: list[AllocationLine] = field(default_factory=list)

    # Weighted percentage change, linear (not compounded)
    total_return: float = 0.0

    # Weighted tier value; 1.0-3.0 when the full 100% is allocated
    risk_score: float = 0.0

    recommendation_text: str = ""

    @property
    def total_percentage(self) -> float:
        """Allocated mass in percentage points (may be below 100)."""
        return sum(line.percentage for line in self.lines)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "lines": [line.to_dict() for line in self.lines],
            "total_return": self.total_return,
            "risk_score": self.risk_score,
            "total_percentage": self.total_percentage,
            "recommendation_text": self.recommendation_text,
        }
