"""Shared pytest fixtures and test markers.

Test tiers
----------
  unit        Fast, pure-function tests of each component.

  integration Full pipeline and CLI runs: config in, bytes/text out.

  quality     Deep validation: WAV containers parsed by the stdlib
              ``wave`` module, property-based (Hypothesis) invariants.

Run specific tiers:
  pytest tests/unit                       # components only
  pytest tests/ -m quality                # deep validation only
  pytest tests/ -v                        # everything
"""

from __future__ import annotations

import os

import pytest

from singen.pipeline import SignalPipeline
from singen.synthesis.models import SampleWidth, SignalConfig


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast offline unit tests")
    config.addinivalue_line("markers", "integration: end-to-end pipeline and CLI flows")
    config.addinivalue_line("markers", "quality: deep container validation and property-based tests")


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SINGEN_* variables from the developer's shell out of CLI tests."""
    for name in list(os.environ):
        if name.startswith("SINGEN_"):
            monkeypatch.delenv(name)


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config() -> SignalConfig:
    """The CLI defaults: 440 Hz, 16 kHz, stereo, 16-bit, 1 ms."""
    return SignalConfig()


@pytest.fixture
def tone_1khz_config() -> SignalConfig:
    """1 kHz mono 16-bit at 16 kHz for 1 ms: exactly one cycle in 16 samples."""
    return SignalConfig(
        frequency=1000.0,
        sample_rate=16_000,
        channel_count=1,
        sample_width=SampleWidth.WIDTH_2_BYTE,
        duration_ms=1.0,
    )


@pytest.fixture
def chirp_config() -> SignalConfig:
    """100 Hz -> 4 kHz sweep, stereo 24-bit at 48 kHz for 50 ms."""
    return SignalConfig(
        frequency=100.0,
        end_frequency=4000.0,
        sample_rate=48_000,
        channel_count=2,
        sample_width=SampleWidth.WIDTH_3_BYTE,
        duration_ms=50.0,
    )


@pytest.fixture
def tone_pipeline(tone_1khz_config: SignalConfig) -> SignalPipeline:
    return SignalPipeline(tone_1khz_config)
