"""Tests for the optional OpenTelemetry setup."""

import pytest
from fastapi import FastAPI

from diveseeks.telemetry import setup_telemetry


def test_telemetry_disabled_by_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("ENABLE_TELEMETRY", raising=False)

    assert setup_telemetry(FastAPI(), "development") is False


def test_telemetry_skipped_under_pytest(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENABLE_TELEMETRY", "1")

    assert setup_telemetry(FastAPI(), "development") is False
