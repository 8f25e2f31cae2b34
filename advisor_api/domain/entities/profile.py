"""User profile and notification entities."""

import math
from dataclasses import dataclass
from enum import Enum

from advisor_api.domain.entities.allocation import RiskProfile

# Self-reported risk tolerance scale
RISK_TOLERANCE_MIN = 1
RISK_TOLERANCE_MAX = 10


class Currency(str, Enum):
    """Display currencies supported by the app."""

    BRL = "BRL"
    USD = "USD"
    EUR = "EUR"


class NotificationType(str, Enum):
    """Kind of notification shown in the notification panel."""

    ALERT = "alert"
    OPPORTUNITY = "opportunity"
    WARNING = "warning"


@dataclass
class UserProfile:
    """Investor profile captured during onboarding."""

    name: str
    risk_profile: RiskProfile
    investment_goal: float  # base currency (BRL)
    risk_tolerance: int  # 1-10, informational only
    preferred_currency: Currency = Currency.BRL

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "risk_profile": self.risk_profile.value,
            "investment_goal": self.investment_goal,
            "risk_tolerance": self.risk_tolerance,
            "preferred_currency": self.preferred_currency.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Build a profile from its dictionary form.

        Raises:
            KeyError: if a required key is missing
            ValueError: if a value is out of range or not recognised
        """
        name = str(data["name"])
        investment_goal = float(data["investment_goal"])
        risk_tolerance = int(data["risk_tolerance"])
        if not name:
            raise ValueError("Profile name is empty")
        if not math.isfinite(investment_goal) or investment_goal <= 0:
            raise ValueError(f"Investment goal must be positive, got {investment_goal}")
        if not RISK_TOLERANCE_MIN <= risk_tolerance <= RISK_TOLERANCE_MAX:
            raise ValueError(
                f"Risk tolerance must be {RISK_TOLERANCE_MIN}-{RISK_TOLERANCE_MAX}, "
                f"got {risk_tolerance}"
            )
        return cls(
            name=name,
            risk_profile=RiskProfile(data["risk_profile"]),
            investment_goal=investment_goal,
            risk_tolerance=risk_tolerance,
            preferred_currency=Currency(data.get("preferred_currency", "BRL")),
        )


@dataclass
class Notification:
    """A single in-app notification."""

    id: str
    type: NotificationType
    title: str
    message: str
    timestamp: str  # ISO format
    read: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "type": self.type.value,
            "title": self.title,
            "message": self.message,
            "timestamp": self.timestamp,
            "read": self.read,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Notification":
        return cls(
            id=str(data["id"]),
            type=NotificationType(data["type"]),
            title=str(data["title"]),
            message=str(data["message"]),
            timestamp=str(data["timestamp"]),
            read=bool(data.get("read", False)),
        )
