"""Pydantic models and numeric tables for test-signal synthesis.

Sample width table (symmetric quantization, positive bound only):

  | Width | Bits | Max positive  |
  |-------|------|---------------|
  |   2   |  16  |        32767  |
  |   3   |  24  |      8388607  |
  |   4   |  32  |   2147483647  |
"""

from __future__ import annotations

import math
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


SUPPORTED_SAMPLE_RATES: frozenset[int] = frozenset({
    16_000,  # speech and telephony
    44_100,  # CD audio
    48_000,  # professional audio and video
})


class ConfigError(ValueError):
    """Base class for invalid generator configuration."""


class ConfigParseError(ConfigError):
    """Raised when a numeric setting cannot be parsed."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")


class ConfigRangeError(ConfigError):
    """Raised when a setting parses but lies outside its allowed values."""


class UnknownFlagError(ConfigError):
    """Raised for an unrecognized command-line option."""


class SampleWidth(IntEnum):
    """Bytes per PCM sample."""

    WIDTH_2_BYTE = 2
    WIDTH_3_BYTE = 3
    WIDTH_4_BYTE = 4

    @property
    def byte_width(self) -> int:
        return int(self)

    @property
    def bits(self) -> int:
        return int(self) * 8

    @property
    def label(self) -> str:
        return str(self.bits)

    @property
    def max_value(self) -> int:
        """Largest positive integer representable at this width."""
        return 2 ** (8 * int(self) - 1) - 1

    @classmethod
    def from_bits(cls, bits: str | int) -> "SampleWidth":
        """Look up a width by bit depth (16, 24 or 32).

        Raises:
            ConfigRangeError: for any other bit depth.
        """
        for width in cls:
            if str(bits).strip() == width.label:
                return width
        raise ConfigRangeError(f"Invalid bit depth {bits!r}. Must be 16, 24, or 32")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


class SignalConfig(BaseModel):
    """Immutable parameters for one generated buffer.

    A steady tone has ``end_frequency == frequency``; anything else is a
    linear chirp from ``frequency`` to ``end_frequency``.
    """

    model_config = ConfigDict(frozen=True)

    frequency: float = Field(default=440.0, allow_inf_nan=False, description="Tone or chirp start frequency in Hz")
    end_frequency: float | None = Field(default=None, description="Chirp end frequency in Hz")
    sample_rate: int = Field(default=16_000, gt=0, description="Samples per second")
    channel_count: int = Field(default=2, ge=1, le=2, description="1 = mono, 2 = stereo")
    sample_width: SampleWidth = Field(default=SampleWidth.WIDTH_2_BYTE)
    duration_ms: float = Field(default=1.0, ge=0.0, allow_inf_nan=False, description="Duration in milliseconds")

    @model_validator(mode="after")
    def _default_end_frequency(self) -> "SignalConfig":
        if self.end_frequency is None:
            object.__setattr__(self, "end_frequency", self.frequency)
        return self

    @property
    def is_chirp(self) -> bool:
        return self.end_frequency != self.frequency

    @property
    def is_recommended_rate(self) -> bool:
        return self.sample_rate in SUPPORTED_SAMPLE_RATES

    @property
    def duration_secs(self) -> float:
        return self.duration_ms / 1000.0

    @property
    def total_samples(self) -> int:
        return round_half_away(self.duration_ms * self.sample_rate / 1000.0)

    @property
    def bytes_per_frame(self) -> int:
        return self.channel_count * self.sample_width.byte_width

    @property
    def total_bytes(self) -> int:
        return self.total_samples * self.bytes_per_frame
