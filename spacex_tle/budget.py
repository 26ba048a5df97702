"""
budget.py
---------
Per-request transaction budget shared by every upstream call of one
aggregation. Created fresh for each request and never replenished.
"""

from __future__ import annotations

import logging
import threading

from spacex_tle.errors import BudgetExceeded

log = logging.getLogger(__name__)


class TransactionBudget:
    def __init__(self, limit: int):
        if limit < 0:
            raise ValueError(f"budget limit must be >= 0, got {limit}")
        self._limit = limit
        self._spent = 0
        self._lock = threading.Lock()

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def spent(self) -> int:
        return self._spent

    @property
    def remaining(self) -> int:
        return self._limit - self._spent

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def spend(self) -> int:
        """Charge one transaction before a call is issued.

        Returns the transaction number (1-based). Raises BudgetExceeded
        when nothing is left, so the limit holds even under concurrent use.
        """
        with self._lock:
            if self._spent >= self._limit:
                raise BudgetExceeded(f"TXN limit ({self._limit}) reached")
            self._spent += 1
            n = self._spent
        log.debug("TXN count: %d/%d", n, self._limit)
        return n

    def __repr__(self) -> str:
        return f"TransactionBudget(limit={self._limit}, spent={self._spent})"
