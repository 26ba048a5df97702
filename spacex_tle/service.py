"""
service.py
----------
Entry point of the core: mission ID in, {payload_id: [tle lines]} out.

    Start -> ResolvingMission -> NotFound (None)
                              -> AggregatingPayloads -> Done (possibly truncated)
                              -> Aborted (UpstreamError raised)
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional

import requests

from spacex_tle.aggregate import TleAggregator
from spacex_tle.budget import TransactionBudget
from spacex_tle.config import TleConfig
from spacex_tle.fetch import JsonFetcher
from spacex_tle.mission import MissionResolver

log = logging.getLogger(__name__)

AggregationResult = Dict[str, List[str]]


class MissionTleService:
    def __init__(
        self,
        config: TleConfig,
        fetcher: Optional[JsonFetcher] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        fetcher = fetcher or JsonFetcher(config.timeout, session=session, secret=config.n2yo_api_key)
        self.resolver = MissionResolver(fetcher, config.mission_base_url)
        self.aggregator = TleAggregator(
            fetcher, config.tle_base_url, config.n2yo_api_key, max_workers=config.max_workers
        )

    def get_mission_tles(self, mission_id: str) -> Optional[AggregationResult]:
        """TLE lines per payload of `mission_id`, or None if the mission is unknown.

        Each call gets its own budget of `config.txn_limit` upstream calls.
        Upstream failures propagate as UpstreamError; nothing partial is returned.
        """
        budget = TransactionBudget(self.config.txn_limit)

        t0 = time.perf_counter()
        norad_ids = self.resolver.resolve(mission_id, budget)
        log.info("Elapsed in get NORAD IDs: %.3fs", time.perf_counter() - t0)
        if norad_ids is None:
            log.info("No launches found for mission %s", mission_id)
            return None

        result = self.aggregator.aggregate(norad_ids, budget)
        skipped = len(norad_ids) - len(result)
        log.info(
            "Mission %s: %d/%d payloads, %d/%d TXN used%s",
            mission_id, len(result), len(norad_ids), budget.spent, budget.limit,
            f", {skipped} skipped" if skipped else "",
        )
        return result
