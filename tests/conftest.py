"""Shared fakes: an in-memory provider pair that counts upstream calls."""

import threading
import time
from unittest.mock import MagicMock

import pytest
import requests

from spacex_tle.config import TleConfig

MISSION_URL = "https://spacex.test/v3/"
TLE_URL = "https://n2yo.test/rest/v1/satellite/"
API_KEY = "TEST-KEY"


def tle_text(norad_id):
    return f"1 {norad_id}U LINE1\r\n2 {norad_id} LINE2"


def tle_lines(norad_id):
    return [f"1 {norad_id}U LINE1", f"2 {norad_id} LINE2"]


def launch(*payloads):
    """payloads: (payload_id, [norad ids]) tuples -> one v3 launch record."""
    return {
        "rocket": {
            "second_stage": {
                "payloads": [{"payload_id": pid, "norad_id": list(ids)} for pid, ids in payloads]
            }
        }
    }


class FakeFetcher:
    """Stands in for JsonFetcher; spends budget like the real one."""

    def __init__(self, launches=None, tles=None, delays=None):
        self.launches = {} if launches is None else launches
        self.tles = {} if tles is None else tles
        self.delays = delays or {}
        self.calls = []
        self._lock = threading.Lock()

    def get_json(self, url, params, budget, *, label="upstream"):
        budget.spend()
        with self._lock:
            self.calls.append((url, dict(params or {})))
        if url.endswith("/launches"):
            return self.launches.get(params["mission_id"], [])
        norad_id = int(url.rsplit("/", 1)[-1])
        if norad_id in self.delays:
            time.sleep(self.delays[norad_id])
        tle = self.tles.get(norad_id, tle_text(norad_id))
        if isinstance(tle, Exception):
            raise tle
        if isinstance(tle, dict):
            return tle
        return {"info": {"satid": norad_id, "satname": f"SAT {norad_id}", "transactionscount": 0}, "tle": tle}

    @property
    def tle_calls(self):
        return [url for url, _ in self.calls if "/tle/" in url]


def json_response(body, status=200):
    resp = MagicMock()
    resp.status_code = status
    resp.headers = {"Content-Type": "application/json; charset=utf-8"}
    resp.text = str(body)
    resp.json.return_value = body
    return resp


def mock_session(launches, tle_for=tle_text):
    """requests.Session stand-in: launches body for the mission URL, N2YO bodies otherwise."""
    session = MagicMock(spec=requests.Session)

    def get(url, params=None, timeout=None):
        if url.endswith("/launches"):
            return json_response(launches)
        norad_id = int(url.rsplit("/", 1)[-1])
        tle = tle_for(norad_id)
        if isinstance(tle, Exception):
            raise tle
        return json_response({"tle": tle})

    session.get.side_effect = get
    return session


@pytest.fixture
def config():
    return TleConfig(
        mission_base_url=MISSION_URL,
        tle_base_url=TLE_URL,
        n2yo_api_key=API_KEY,
        txn_limit=6,
    )


@pytest.fixture
def m1_fetcher():
    """M1 -> {P1: [100, 101], P2: [200]}"""
    return FakeFetcher(launches={"M1": [launch(("P1", [100, 101]), ("P2", [200]))]})
