"""Instrument catalog loading.

The catalog is either the built-in sample or a JSON file holding a list of
instrument dicts (same keys as Instrument.to_dict()).
"""

import json
import logging
from pathlib import Path

from advisor_api.catalog.sample import SAMPLE_INSTRUMENTS
from advisor_api.core.config import get_catalog_path
from advisor_api.domain.entities import Instrument, InstrumentTypeFilter
from advisor_api.domain.exceptions import DataNotFoundError, StorageReadError

logger = logging.getLogger(__name__)


def parse_instruments(records: list[dict]) -> list[Instrument]:
    """Convert raw instrument dicts to Instrument entities, keeping order."""
    return [Instrument.from_dict(record) for record in records]


def load_catalog(path: Path | str | None = None) -> list[Instrument]:
    """Load the instrument catalog.

    Args:
        path: JSON catalog file. Defaults to INSTRUMENT_CATALOG_PATH, and to
              the built-in sample when that is unset.

    Returns:
        Instruments in catalog order

    Raises:
        StorageReadError: if the file is missing, unreadable or malformed
    """
    if path is None:
        path = get_catalog_path()
    if path is None:
        return parse_instruments(SAMPLE_INSTRUMENTS)

    path = Path(path)
    try:
        records = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise StorageReadError(f"Cannot read instrument catalog: {e}", path=str(path)) from e

    if not isinstance(records, list):
        raise StorageReadError(
            "Instrument catalog must be a JSON list", path=str(path)
        )
    try:
        instruments = parse_instruments(records)
    except (KeyError, TypeError, ValueError) as e:
        raise StorageReadError(f"Malformed instrument record: {e}", path=str(path)) from e

    logger.info(f"Loaded {len(instruments)} instruments from {path}")
    return instruments


def filter_by_type(
    instruments: list[Instrument], type_filter: InstrumentTypeFilter
) -> list[Instrument]:
    """Keep instruments of the given kind (all of them for ALL)."""
    if type_filter == InstrumentTypeFilter.ALL:
        return list(instruments)
    return [inst for inst in instruments if inst.kind.value == type_filter.value]


def get_instrument(instruments: list[Instrument], instrument_id: str) -> Instrument:
    """Look up an instrument by id.

    Raises:
        DataNotFoundError: if no instrument has that id
    """
    for inst in instruments:
        if inst.id == instrument_id:
            return inst
    raise DataNotFoundError(
        f"Instrument not found: {instrument_id}", resource=instrument_id
    )
