"""Instrument catalog module."""

from advisor_api.catalog.loader import (
    filter_by_type,
    get_instrument,
    load_catalog,
    parse_instruments,
)
from advisor_api.catalog.sample import SAMPLE_INSTRUMENTS

__all__ = [
    "SAMPLE_INSTRUMENTS",
    "filter_by_type",
    "get_instrument",
    "load_catalog",
    "parse_instruments",
]
