"""Domain services - pure business logic with no external dependencies.

These services contain the core algorithms and business logic.
They depend only on domain entities and standard library types.
"""

from advisor_api.domain.services.allocation import (
    allocate,
    assign_weights,
    classify_risk_score,
    compute_risk_score,
    compute_total_return,
    filter_eligible,
    partition_by_tier,
)

__all__ = [
    "allocate",
    "assign_weights",
    "classify_risk_score",
    "compute_risk_score",
    "compute_total_return",
    "filter_eligible",
    "partition_by_tier",
]
