"""Custom exceptions for advisor_api domain.

The allocator itself never raises: empty pools and empty tiers degrade to a
smaller allocation. These exceptions cover the layers around it.
"""

from typing import Any


class AdvisorAPIError(Exception):
    """Base exception for all advisor_api errors."""

    pass


# ============================================================================
# Data errors
# ============================================================================


class DataError(AdvisorAPIError):
    """Base class for data-related errors."""

    pass


class DataValidationError(DataError):
    """Raised when caller-supplied data fails validation.

    Examples:
    - Non-positive or unparsable amount to allocate
    - Risk tolerance outside 1-10
    - Quiz answer that is not one of the offered options
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class DataNotFoundError(DataError):
    """Raised when required data cannot be found.

    Examples:
    - No stored user profile
    - Unknown notification or instrument id
    """

    def __init__(self, message: str, resource: str | None = None):
        super().__init__(message)
        self.resource = resource


# ============================================================================
# Analysis errors
# ============================================================================


class AnalysisError(AdvisorAPIError):
    """Base class for analysis-run errors."""

    pass


class AnalysisInProgressError(AnalysisError):
    """Raised when an analysis is requested while another is still running."""

    pass


# ============================================================================
# Storage errors
# ============================================================================


class StorageError(AdvisorAPIError):
    """Base class for storage-related errors."""

    pass


class StorageReadError(StorageError):
    """Raised when reading from storage fails."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class StorageWriteError(StorageError):
    """Raised when writing to storage fails."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
