"""Root endpoint (service banner)."""

from fastapi import APIRouter

from advisor_api import __version__

router = APIRouter(tags=["root"])


@router.get("/")
def read_root() -> dict:
    """Service banner."""
    return {"message": "Hello from Advisor API", "service": "advisor-api", "version": __version__}
