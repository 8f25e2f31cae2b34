"""FastAPI application entrypoint."""

from fastapi import FastAPI

from advisor_api import __version__
from advisor_api.routes import (
    allocation,
    catalog,
    health,
    notifications,
    onboarding,
    profile,
    root,
)

app = FastAPI(
    title="Advisor API",
    description="Investment profile onboarding and rule-based portfolio allocation",
    version=__version__,
)

app.include_router(root.router)
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(allocation.router, prefix="/allocation", tags=["allocation"])
app.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
app.include_router(profile.router, prefix="/profile", tags=["profile"])
app.include_router(onboarding.router, prefix="/onboarding", tags=["onboarding"])
app.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
app.include_router(notifications.watchlist_router, prefix="/watchlist", tags=["watchlist"])
