"""
aggregate.py
------------
Fans a resolved mission out to N2YO, one call per NORAD ID, within the
request's transaction budget.

Budget is consumed payload by payload in resolution order: a payload gets
the first min(remaining, len(ids)) of its IDs, and once nothing remains the
later payloads are left out of the result entirely.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Dict, List, Mapping, Sequence

from pydantic import ValidationError

from spacex_tle.budget import TransactionBudget
from spacex_tle.errors import MalformedUpstreamResponse, UpstreamUnavailable
from spacex_tle.fetch import JsonFetcher
from spacex_tle.schemas import N2yoTleResponse
from spacex_tle.utils import join_url, safe_get, split_tle

log = logging.getLogger(__name__)

PROVIDER = "n2yo"


class TleAggregator:
    def __init__(self, fetcher: JsonFetcher, base_url: str, api_key: str, max_workers: int = 1):
        self._fetcher = fetcher
        self._base_url = base_url
        self._api_key = api_key
        self._max_workers = max(1, max_workers)

    def aggregate(
        self, payload_map: Mapping[str, Sequence[int]], budget: TransactionBudget
    ) -> Dict[str, List[str]]:
        payload_tles: Dict[str, List[str]] = {}
        for payload_id, norad_ids in payload_map.items():
            remaining = budget.remaining
            if remaining <= 0:
                log.info('TXN limit (%d) reached. Skip TLEs for payload "%s"', budget.limit, payload_id)
                continue
            t0 = time.perf_counter()
            batch = list(norad_ids[: min(remaining, len(norad_ids))])
            log.debug("Get TLEs for NORAD IDs %s", batch)
            payload_tles[payload_id] = self._tles_for_norad_ids(batch, budget)
            log.info("Elapsed in Get TLEs for payload %s: %.3fs", payload_id, time.perf_counter() - t0)
        return payload_tles

    def fetch_tle(self, norad_id: int, budget: TransactionBudget) -> List[str]:
        """Element lines for one NORAD ID; an empty TLE gives []."""
        url = join_url(self._base_url, f"tle/{norad_id}")
        body = self._fetcher.get_json(url, {"apiKey": self._api_key}, budget, label=PROVIDER)

        error = safe_get(body, "error")
        if error:
            raise UpstreamUnavailable(f"{PROVIDER} error for NORAD ID {norad_id}: {error}", provider=PROVIDER)
        try:
            parsed = N2yoTleResponse.model_validate(body)
        except ValidationError as e:
            raise MalformedUpstreamResponse(
                f"{PROVIDER} response for NORAD ID {norad_id} is malformed: {e}", provider=PROVIDER
            ) from e
        return split_tle(parsed.tle)

    def _tles_for_norad_ids(self, norad_ids: List[int], budget: TransactionBudget) -> List[str]:
        if self._max_workers == 1 or len(norad_ids) <= 1:
            blocks = [self.fetch_tle(norad_id, budget) for norad_id in norad_ids]
        else:
            workers = min(self._max_workers, len(norad_ids))
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [executor.submit(self.fetch_tle, i, budget) for i in norad_ids]
                wait(futures, return_when=FIRST_EXCEPTION)
                failed = next((f for f in futures if f.done() and not f.cancelled() and f.exception()), None)
                if failed is not None:
                    # calls not yet started are never sent or charged
                    executor.shutdown(wait=False, cancel_futures=True)
                    raise failed.exception()
                # collected in submit order, so lines stay in NORAD ID order
                blocks = [f.result() for f in futures]
        return [line for block in blocks for line in block]
