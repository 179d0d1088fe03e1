"""Shared fixtures for Tasmee tests."""

import os

import pytest

from tasmee.config import reset_settings


class FakeClock:
    """Manually advanced clock for cache tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate each test from TASMEE_* env vars and runtime overrides."""
    for key in list(os.environ):
        if key.startswith("TASMEE_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fatiha_1() -> str:
    """Al-Fatiha 1:1 with full diacritics, as printed."""
    return "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ"
