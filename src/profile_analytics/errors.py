"""Errors raised while acquiring profile data.

Every error carries a human-readable ``message``; the orchestrator shows that
message to the user instead of letting the exception escape.
"""

from typing import Optional


class AcquisitionError(Exception):
    """Base class for failures of a single acquisition attempt."""

    code = "ACQUISITION_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AcquisitionError):
    """The username was empty or otherwise unusable. No I/O was attempted."""

    code = "VALIDATION_ERROR"


class NotFoundError(AcquisitionError):
    code = "NOT_FOUND"

    def __init__(self, username: str):
        super().__init__(f"User '{username}' not found")
        self.username = username


class RateLimitedError(AcquisitionError):
    code = "RATE_LIMITED"

    def __init__(self, message: str = "API rate limit exceeded, try again later"):
        super().__init__(message)


class RemoteError(AcquisitionError):
    """The API answered with an unexpected status or payload."""

    code = "REMOTE_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(AcquisitionError):
    """The relay or API could not be reached at all."""

    code = "NETWORK_ERROR"
