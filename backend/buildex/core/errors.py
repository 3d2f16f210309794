"""
Error types for the nearby places pipeline.
Lower layers raise these; the places service turns them into failure results.
"""
from typing import Optional

RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})


class BuildexError(Exception):
    """Base exception for Buildex errors."""
    pass


class InvalidCategory(BuildexError):
    """Raised when a category key is not part of the taxonomy."""
    def __init__(self, category: str):
        super().__init__(f"Unknown place category: {category!r}")
        self.category = category


class ServiceError(BuildexError):
    """A single Overpass mirror answered with an error or an unusable body."""
    def __init__(
        self,
        endpoint: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.endpoint = endpoint
        self.status_code = status_code
        self.detail = detail
        message = f"Overpass endpoint {endpoint} failed"
        if status_code is not None:
            message += f" with status {status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return self.status_code in RETRYABLE_STATUS_CODES


class OverpassTimeoutError(BuildexError, TimeoutError):
    """A single Overpass mirror did not answer within its deadline."""
    def __init__(self, endpoint: str, timeout_seconds: float):
        super().__init__(f"Overpass endpoint {endpoint} timed out after {timeout_seconds:g}s")
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds


class AllEndpointsUnavailable(BuildexError):
    """Every configured mirror was tried and none produced a usable response."""
    def __init__(self, attempts: int, last_error: Optional[BuildexError] = None, timed_out: Optional[bool] = None):
        self.attempts = attempts
        self.last_error = last_error
        if timed_out is None:
            timed_out = isinstance(last_error, OverpassTimeoutError)
        self.timed_out = timed_out
        reason = "timed out" if timed_out else "unavailable"
        super().__init__(f"All Overpass endpoints {reason} after {attempts} attempt(s); last error: {last_error}")
