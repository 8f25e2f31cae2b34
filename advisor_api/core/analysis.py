"""Analysis runs around the allocator.

Provides:
- Caller-side validation of the requested amount
- A busy/idle latch so only one analysis runs at a time
- The optional artificial delay shown to users as "thinking"
"""

import logging
import math
import threading
import time
from collections.abc import Callable, Sequence

from advisor_api.domain.entities import (
    AllocationRequest,
    AllocationResult,
    Instrument,
)
from advisor_api.domain.exceptions import (
    AnalysisInProgressError,
    DataValidationError,
)
from advisor_api.domain.services import allocate, classify_risk_score

logger = logging.getLogger(__name__)


def parse_amount(raw: str | float | int | None) -> float:
    """Validate the amount a user asked to allocate.

    Args:
        raw: Number or numeric string as entered

    Returns:
        The amount as a positive, finite float

    Raises:
        DataValidationError: if the amount is empty, unparsable, not finite
            or not positive
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise DataValidationError("Please enter an amount", field="amount", value=raw)
    if isinstance(raw, bool):
        raise DataValidationError("Amount must be a number", field="amount", value=raw)
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        raise DataValidationError(
            f"Amount must be a number, got '{raw}'", field="amount", value=raw
        ) from None
    if not math.isfinite(amount) or amount <= 0:
        raise DataValidationError(
            "Please enter a valid amount greater than zero", field="amount", value=raw
        )
    return amount


class AnalysisSession:
    """Runs one analysis at a time.

    A second call while one is outstanding is refused rather than queued.
    There is no cancellation, retry or timeout.
    """

    def __init__(
        self,
        delay_seconds: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the session.

        Args:
            delay_seconds: Artificial delay before the result is returned
            sleep: Sleep function (injectable for tests)
        """
        self.delay_seconds = delay_seconds
        self._sleep = sleep
        self._latch = threading.Lock()

    @property
    def busy(self) -> bool:
        """True while an analysis is outstanding."""
        return self._latch.locked()

    def run(
        self,
        request: AllocationRequest,
        pool: Sequence[Instrument],
    ) -> AllocationResult:
        """Run the allocator for one request.

        Raises:
            AnalysisInProgressError: if another analysis is still running
        """
        if not self._latch.acquire(blocking=False):
            raise AnalysisInProgressError("An analysis is already in progress")
        try:
            if self.delay_seconds > 0:
                self._sleep(self.delay_seconds)
            result = allocate(request, pool)
        finally:
            self._latch.release()

        logger.info(
            f"Analysis done: profile={request.risk_profile.value} "
            f"filter={request.instrument_type_filter.value} "
            f"lines={len(result.lines)} mass={result.total_percentage:.1f}% "
            f"risk={result.risk_score:.2f} ({classify_risk_score(result.risk_score).value})"
        )
        return result
