"""Storage for the user's profile, notifications and watchlist."""

from advisor_api.storage.local import (
    LocalProfileStore,
    resolve_risk_profile,
)

__all__ = [
    "LocalProfileStore",
    "resolve_risk_profile",
]
