"""Domain entities - pure dataclasses with no external dependencies.

These entities represent the core business objects in the domain model.
"""

from advisor_api.domain.entities.allocation import (
    AllocationLine,
    AllocationRequest,
    AllocationResult,
    Instrument,
    InstrumentKind,
    InstrumentTypeFilter,
    Recommendation,
    RiskLabel,
    RiskProfile,
    RiskTier,
)
from advisor_api.domain.entities.profile import (
    Currency,
    Notification,
    NotificationType,
    UserProfile,
)

__all__ = [
    # Allocation
    "AllocationLine",
    "AllocationRequest",
    "AllocationResult",
    "Instrument",
    "InstrumentKind",
    "InstrumentTypeFilter",
    "Recommendation",
    "RiskLabel",
    "RiskProfile",
    "RiskTier",
    # Profile
    "Currency",
    "Notification",
    "NotificationType",
    "UserProfile",
]
