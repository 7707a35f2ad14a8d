from fastapi import FastAPI

from src.config import settings
from src.telemetry import setup_telemetry


def test_telemetry_disabled_by_default():
    assert setup_telemetry(FastAPI()) is False


def test_telemetry_skipped_under_pytest(monkeypatch):
    monkeypatch.setattr(settings, "enable_telemetry", True)

    assert setup_telemetry(FastAPI()) is False
