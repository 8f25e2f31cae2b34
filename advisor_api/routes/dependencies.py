"""Dependency injection shared by the endpoints."""

import logging

from fastapi import HTTPException

from advisor_api.catalog import load_catalog
from advisor_api.core.analysis import AnalysisSession
from advisor_api.core.config import get_analysis_delay
from advisor_api.domain.entities import Instrument
from advisor_api.domain.exceptions import StorageReadError
from advisor_api.storage import LocalProfileStore

logger = logging.getLogger(__name__)

# Module-level instance (lazy initialization); one latch for the process
_analysis_session: AnalysisSession | None = None


def get_profile_store() -> LocalProfileStore:
    """Get the profile store for the configured data path."""
    return LocalProfileStore()


def get_catalog() -> list[Instrument]:
    """Get the current instrument catalog snapshot.

    Raises:
        HTTPException 503: if the configured catalog file cannot be loaded
    """
    try:
        return load_catalog()
    except StorageReadError as e:
        logger.error(f"Instrument catalog unavailable: {e}")
        raise HTTPException(
            status_code=503,
            detail=f"Instrument catalog unavailable: {e}",
        ) from None


def get_analysis_session() -> AnalysisSession:
    """Get or create the shared analysis session."""
    global _analysis_session
    if _analysis_session is None:
        _analysis_session = AnalysisSession(delay_seconds=get_analysis_delay())
    return _analysis_session
