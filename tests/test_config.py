import pytest
from pydantic import ValidationError

from spacex_tle.config import DEFAULT_TXN_LIMIT, MISSION_BASE_URL, TleConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for suffix in ["MISSION_URL", "N2YO_URL", "N2YO_API_KEY", "TXN_LIMIT", "TIMEOUT", "MAX_WORKERS", "LOG_LEVEL"]:
        monkeypatch.delenv("SPACEX_TLE_" + suffix, raising=False)


def test_defaults():
    cfg = load_config()
    assert cfg.mission_base_url == MISSION_BASE_URL
    assert cfg.txn_limit == DEFAULT_TXN_LIMIT
    assert cfg.max_workers == 1


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SPACEX_TLE_N2YO_API_KEY", "abc")
    monkeypatch.setenv("SPACEX_TLE_TXN_LIMIT", "12")
    monkeypatch.setenv("SPACEX_TLE_TIMEOUT", "2.5")
    cfg = load_config()
    assert cfg.n2yo_api_key == "abc"
    assert cfg.txn_limit == 12
    assert cfg.timeout == 2.5


def test_blank_env_keeps_default(monkeypatch):
    monkeypatch.setenv("SPACEX_TLE_TXN_LIMIT", "  ")
    assert load_config().txn_limit == DEFAULT_TXN_LIMIT


@pytest.mark.parametrize("value", ["0", "-3", "lots"])
def test_bad_txn_limit_rejected(monkeypatch, value):
    monkeypatch.setenv("SPACEX_TLE_TXN_LIMIT", value)
    with pytest.raises(ValidationError):
        load_config()


def test_config_is_frozen():
    cfg = TleConfig()
    with pytest.raises(ValidationError):
        cfg.txn_limit = 99
