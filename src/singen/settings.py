"""Command-line defaults.

Uses pydantic-settings so defaults can be overridden with SINGEN_* environment
variables (e.g. SINGEN_SAMPLE_RATE=48000). Explicit flags always win.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class GeneratorSettings(BaseSettings):
    # Signal
    frequency: float = 440.0
    end_frequency: float | None = None
    duration_ms: float = 1.0

    # Format
    sample_rate: int = 16_000
    channels: int = 2
    bits: int = 16

    # Rendering
    output: str = "hex"

    model_config = SettingsConfigDict(env_prefix="SINGEN_", extra="ignore")
