import importlib

import pytest

import config as config_mod


@pytest.fixture
def reload_config(monkeypatch):
    def _reload():
        return importlib.reload(config_mod)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config_mod)


def test_config_defaults(monkeypatch, reload_config):
    for name in ("MINIKV_SWEEP_INTERVAL", "MINIKV_SHARDS", "MINIKV_SERIALIZER", "MINIKV_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    cfg = reload_config()

    assert cfg.SWEEP_INTERVAL_SECONDS == 1.0
    assert cfg.STORE_SHARDS == 16
    assert cfg.SERIALIZER == "pickle"
    assert cfg.LOG_LEVEL == "INFO"


def test_config_reads_environment(monkeypatch, reload_config):
    monkeypatch.setenv("MINIKV_SWEEP_INTERVAL", " 0.25 ")
    monkeypatch.setenv("MINIKV_SHARDS", "4")
    monkeypatch.setenv("MINIKV_SERIALIZER", "json")
    monkeypatch.setenv("MINIKV_LOG_LEVEL", "DEBUG")

    cfg = reload_config()

    assert cfg.SWEEP_INTERVAL_SECONDS == 0.25
    assert cfg.STORE_SHARDS == 4
    assert cfg.SERIALIZER == "json"
    assert cfg.LOG_LEVEL == "DEBUG"


def test_config_garbled_values_fall_back(monkeypatch, reload_config):
    monkeypatch.setenv("MINIKV_SWEEP_INTERVAL", "soon")
    monkeypatch.setenv("MINIKV_SHARDS", "many")
    monkeypatch.setenv("MINIKV_SERIALIZER", "   ")

    cfg = reload_config()

    assert cfg.SWEEP_INTERVAL_SECONDS == 1.0
    assert cfg.STORE_SHARDS == 16
    assert cfg.SERIALIZER == "pickle"
