"""
schemas.py
----------
Typed envelopes for the two providers. Only the fields the aggregation
reads are declared; everything else in the payload is ignored.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, TypeAdapter


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ---- SpaceX data API (v3 launches, filtered) ----
class PayloadRecord(_Record):
    payload_id: StrictStr
    norad_id: List[StrictInt]


class SecondStage(_Record):
    payloads: List[PayloadRecord]


class Rocket(_Record):
    second_stage: SecondStage


class LaunchRecord(_Record):
    rocket: Rocket


LAUNCHES = TypeAdapter(List[LaunchRecord])


# ---- N2YO (tle/{id}) ----
class N2yoSatInfo(_Record):
    satid: int
    satname: Optional[str] = None
    transactionscount: int = 0


class N2yoTleResponse(_Record):
    info: Optional[N2yoSatInfo] = None
    tle: StrictStr
