"""Exceptions raised by the Loan Tracker frontend."""

from typing import Optional


class LoanTrackerError(Exception):
    """Base class for Loan Tracker errors."""


class RequestFailed(LoanTrackerError):
    """A backend request did not succeed.

    The message is the raw response body text for HTTP errors, or the
    transport error text when no response arrived.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
