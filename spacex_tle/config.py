# Provider endpoints + per-request budget
# MISSION SOURCE: https://api.spacexdata.com/v3/launches
#   ?mission_id=<id>&filter=rocket/second_stage/payloads/(payload_id,norad_id)
# TLE SOURCE:     https://api.n2yo.com/rest/v1/satellite/tle/<norad_id>?apiKey=<key>
#
# Every upstream call (1 mission lookup + 1 per NORAD ID) counts against
# txn_limit. N2YO's free tier is metered per call, so keep the limit small.
from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

MISSION_BASE_URL = "https://api.spacexdata.com/v3/"
TLE_BASE_URL = "https://api.n2yo.com/rest/v1/satellite/"
DEFAULT_TXN_LIMIT = 6

ENV_PREFIX = "SPACEX_TLE_"


class TleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    mission_base_url: str = MISSION_BASE_URL
    tle_base_url: str = TLE_BASE_URL
    n2yo_api_key: str = ""
    txn_limit: int = Field(DEFAULT_TXN_LIMIT, ge=1)
    timeout: float = Field(30.0, gt=0)
    max_workers: int = Field(1, ge=1)
    log_level: str = "INFO"


def load_config() -> TleConfig:
    """Build config from SPACEX_TLE_* env vars; unset vars keep defaults."""
    fields = {
        "mission_base_url": "MISSION_URL",
        "tle_base_url": "N2YO_URL",
        "n2yo_api_key": "N2YO_API_KEY",
        "txn_limit": "TXN_LIMIT",
        "timeout": "TIMEOUT",
        "max_workers": "MAX_WORKERS",
        "log_level": "LOG_LEVEL",
    }
    values = {}
    for name, suffix in fields.items():
        raw = os.getenv(ENV_PREFIX + suffix, "").strip()
        if raw:
            values[name] = raw
    return TleConfig(**values)
