"""
utils.py
--------
Small request/response shaping helpers shared by the fetcher, the
resolver and the aggregator.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping

TLE_LINE_BREAK = "\r\n"
REDACTED = "***"


def split_tle(text: str) -> List[str]:
    """Split an N2YO TLE block into its element lines ("" -> [])."""
    if not text:
        return []
    return text.split(TLE_LINE_BREAK)


def join_url(base: str, path: str) -> str:
    """Join a base URL and a relative path with exactly one slash."""
    return base.rstrip("/") + "/" + path.lstrip("/")


def redact(params: Mapping[str, Any] | None, secret: str) -> Dict[str, Any]:
    """Copy of query params with any value equal to `secret` masked."""
    if not params:
        return {}
    return {k: (REDACTED if secret and v == secret else v) for k, v in params.items()}


def redact_text(text: str, secret: str) -> str:
    """`text` with every occurrence of `secret` masked."""
    return text.replace(secret, REDACTED) if secret else text


def safe_get(d: Any, key: str, default: Any = None) -> Any:
    return d.get(key, default) if isinstance(d, dict) else default


def result_to_json(result: Mapping[str, List[str]] | None, indent: int | None = None) -> str:
    return json.dumps(result, indent=indent)
