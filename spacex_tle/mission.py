"""
mission.py
----------
Resolves a SpaceX mission ID to {payload_id: [norad_id, ...]} with a single
filtered call to the v3 launches endpoint.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from spacex_tle.budget import TransactionBudget
from spacex_tle.errors import MalformedUpstreamResponse
from spacex_tle.fetch import JsonFetcher
from spacex_tle.schemas import LAUNCHES
from spacex_tle.utils import join_url

log = logging.getLogger(__name__)

PROVIDER = "SpaceXData"
PAYLOAD_FILTER = "rocket/second_stage/payloads/(payload_id,norad_id)"


class MissionResolver:
    def __init__(self, fetcher: JsonFetcher, base_url: str):
        self._fetcher = fetcher
        self._url = join_url(base_url, "launches")

    def resolve(self, mission_id: str, budget: TransactionBudget) -> Optional[Dict[str, List[int]]]:
        """Return payload -> NORAD IDs for `mission_id`, or None if no launch matches.

        A payload ID repeated across launches keeps the last launch's IDs.
        """
        log.debug('Request NORAD IDs for mission "%s"', mission_id)
        params = {"mission_id": mission_id, "filter": PAYLOAD_FILTER}
        body = self._fetcher.get_json(self._url, params, budget, label=PROVIDER)

        if not isinstance(body, list):
            raise MalformedUpstreamResponse(f"{PROVIDER} API did not return an array", provider=PROVIDER)
        if not body:
            log.debug("No launches found for mission %s", mission_id)
            return None

        try:
            launches = LAUNCHES.validate_python(body)
        except ValidationError as e:
            raise MalformedUpstreamResponse(
                f"{PROVIDER} launch record missing expected fields: {e}", provider=PROVIDER
            ) from e

        log.debug("%d launches found for mission %s", len(launches), mission_id)
        payload_norad_ids: Dict[str, List[int]] = {}
        for n, launch in enumerate(launches, start=1):
            payloads = launch.rocket.second_stage.payloads
            log.debug("%d payloads in mission %s, launch %d", len(payloads), mission_id, n)
            for payload in payloads:
                log.debug("Payload %s has %d NORAD ID(s)", payload.payload_id, len(payload.norad_id))
                payload_norad_ids[payload.payload_id] = list(payload.norad_id)
        return payload_norad_ids
