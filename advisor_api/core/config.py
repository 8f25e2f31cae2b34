"""Configuration resolved from environment variables."""

import math
import os
from pathlib import Path

from advisor_api.domain.entities import Currency

# Environment variable names
ENV_DATA_PATH = "ADVISOR_DATA_PATH"
ENV_CATALOG_PATH = "INSTRUMENT_CATALOG_PATH"
ENV_ANALYSIS_DELAY = "ANALYSIS_DELAY_SECONDS"
ENV_DEFAULT_CURRENCY = "DEFAULT_CURRENCY"

# Defaults
DEFAULT_DATA_PATH = Path("data")
DEFAULT_ANALYSIS_DELAY = 0.0


def get_data_path() -> Path:
    """Base directory for the profile store (ADVISOR_DATA_PATH, default 'data')."""
    value = os.environ.get(ENV_DATA_PATH, "")
    return Path(value) if value else DEFAULT_DATA_PATH


def get_catalog_path() -> Path | None:
    """JSON catalog override, or None to use the built-in sample."""
    value = os.environ.get(ENV_CATALOG_PATH, "")
    return Path(value) if value else None


def get_analysis_delay() -> float:
    """Artificial "thinking" delay before an analysis returns, in seconds.

    Reads ANALYSIS_DELAY_SECONDS (default: 0).

    Raises:
        ValueError: if the value is not a finite, non-negative number
    """
    value = os.environ.get(ENV_ANALYSIS_DELAY, "")
    if not value:
        return DEFAULT_ANALYSIS_DELAY
    try:
        delay = float(value)
    except ValueError:
        raise ValueError(
            f"Invalid {ENV_ANALYSIS_DELAY}='{value}'. Expected a number of seconds."
        ) from None
    if not math.isfinite(delay) or delay < 0:
        raise ValueError(
            f"Invalid {ENV_ANALYSIS_DELAY}='{value}'. Must be >= 0."
        )
    return delay


def get_default_currency() -> Currency:
    """Display currency used when the request and profile name none.

    Reads DEFAULT_CURRENCY (case-insensitive, default: BRL).

    Raises:
        ValueError: if the value is not a supported currency
    """
    value = os.environ.get(ENV_DEFAULT_CURRENCY, "").strip().upper()
    if not value:
        return Currency.BRL
    try:
        return Currency(value)
    except ValueError:
        valid = ", ".join(c.value for c in Currency)
        raise ValueError(
            f"Invalid {ENV_DEFAULT_CURRENCY}='{value}'. Valid values: {valid}"
        ) from None
