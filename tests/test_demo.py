import logging

import demo.demo as demo_mod
from core.cache import Cache
from serializers.json_serializer import JsonSerializer


def test_expiry_demo_value_disappears(cache, clock, caplog):
    caplog.set_level(logging.INFO, logger="demo.demo")

    before, after = demo_mod.run_expiry_demo(cache, sleep=lambda s: clock.advance(int(s * 1000)))

    assert before == "Mini Redis Demo"
    assert after is None
    assert "After expiry, value: None" in caplog.text


def test_persistent_demo_value_survives(clock):
    with Cache(serializer=JsonSerializer(), start_sweeper=False) as cache:
        value = demo_mod.run_persistent_demo(cache, sleep=lambda s: clock.advance(int(s * 1000)))
        assert value == 42
        assert cache.ttl("x") == -1


def test_main_runs_both_scenarios(monkeypatch, clock):
    slept = []

    def fake_sleep(seconds: float) -> None:
        slept.append(seconds)
        clock.advance(int(seconds * 1000))

    monkeypatch.setattr(demo_mod.time, "sleep", fake_sleep)

    demo_mod.main(["--serializer", "json", "--wait", "2", "--log-level", "WARNING"])

    assert slept == [4.0, 2.0]
