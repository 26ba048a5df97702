"""
fetch.py
--------
Thin JSON-over-HTTP fetcher used for both providers. Every call spends one
transaction from the request's budget before it goes out.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Optional

import requests

from spacex_tle.budget import TransactionBudget
from spacex_tle.errors import MalformedUpstreamResponse, UpstreamUnavailable
from spacex_tle.utils import redact, redact_text

log = logging.getLogger(__name__)


class JsonFetcher:
    def __init__(
        self,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
        secret: str = "",
    ):
        self._timeout = timeout
        self._session = session or requests.Session()
        self._secret = secret

    def get_json(
        self,
        url: str,
        params: Optional[Mapping[str, Any]],
        budget: TransactionBudget,
        *,
        label: str = "upstream",
    ) -> Any:
        """GET `url` and decode the JSON body.

        Raises UpstreamUnavailable for transport errors and non-2xx statuses,
        MalformedUpstreamResponse when the body is not JSON.
        """
        txn = budget.spend()
        log.debug("[TXN %d] (%s) GET %s %s", txn, label, url, redact(params, self._secret))
        t0 = time.perf_counter()
        try:
            resp = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise UpstreamUnavailable(
                redact_text(f"{label} request failed: {e}", self._secret), provider=label
            ) from e
        log.info("Elapsed in (%s) GET %s: %.3fs", label, url, time.perf_counter() - t0)

        if not 200 <= resp.status_code < 300:
            raise UpstreamUnavailable(
                f"{label} returned HTTP {resp.status_code}",
                provider=label,
                status_code=resp.status_code,
            )

        content_type = resp.headers.get("Content-Type", "")
        if "json" not in content_type:
            raise MalformedUpstreamResponse(
                f"{label} did not return JSON (Content-Type: {content_type or 'missing'})",
                provider=label,
            )
        log.debug("Response body: %s", resp.text)
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedUpstreamResponse(
                redact_text(f"{label} returned invalid JSON: {e}", self._secret), provider=label
            ) from e
