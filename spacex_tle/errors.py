"""
errors.py
---------
Failure types raised while talking to the upstream providers.

Not-found and budget exhaustion are normal outcomes and have no exception.
"""

from __future__ import annotations


class UpstreamError(Exception):
    """A provider call failed; the whole aggregation is abandoned."""

    def __init__(self, message: str, provider: str = "upstream"):
        super().__init__(message)
        self.provider = provider


class UpstreamUnavailable(UpstreamError):
    """Connection error, timeout, non-2xx status or a provider error envelope."""

    def __init__(self, message: str, provider: str = "upstream", status_code: int | None = None):
        super().__init__(message, provider)
        self.status_code = status_code


class MalformedUpstreamResponse(UpstreamError):
    """Response arrived but was not JSON, or lacked an expected field."""


class BudgetExceeded(RuntimeError):
    """Raised when a transaction is spent after the budget hit zero."""
