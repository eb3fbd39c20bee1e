"""Fixed-point quantization and interleaved PCM encoding."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..synthesis.models import SampleWidth, round_half_away

logger = logging.getLogger(__name__)


class SampleBuffer(BaseModel):
    """Encoded little-endian PCM bytes plus the metadata needed to interpret them."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(default=b"", description="Interleaved frame-major PCM bytes")
    total_samples: int = Field(default=0, ge=0, description="Frames (samples per channel)")
    channel_count: int = Field(default=1, ge=1, le=2)
    sample_width: SampleWidth = Field(default=SampleWidth.WIDTH_2_BYTE)

    @model_validator(mode="after")
    def _check_size(self) -> "SampleBuffer":
        expected = self.total_samples * self.channel_count * self.sample_width.byte_width
        if len(self.data) != expected:
            raise ValueError(
                f"buffer holds {len(self.data)} bytes, expected {expected} "
                f"({self.total_samples} samples x {self.channel_count} ch x {self.sample_width.byte_width} B)"
            )
        return self

    @property
    def total_bytes(self) -> int:
        return len(self.data)

    @property
    def block_align(self) -> int:
        return self.channel_count * self.sample_width.byte_width


def quantize(sample: float, sample_width: SampleWidth) -> int:
    """Scale a normalized sample by the width's positive bound and round half away from zero.

    No clipping: inputs outside [-1.0, 1.0] produce integers outside the
    width's range, which ``pack_sample`` then wraps.
    """
    return round_half_away(sample * sample_width.max_value)


def pack_sample(value: int, sample_width: SampleWidth) -> bytes:
    """Return the lowest ``sample_width`` bytes of ``value`` as little-endian two's complement."""
    width = sample_width.byte_width
    mask = (1 << (8 * width)) - 1
    return (value & mask).to_bytes(width, "little")


def encode_samples(
    samples: Iterable[float],
    channel_count: int,
    sample_width: SampleWidth,
) -> SampleBuffer:
    """Quantize normalized samples and interleave them across channels.

    Every channel carries the same bytes. Layout is frame-major:
    s0/ch0, s0/ch1, s1/ch0, s1/ch1, ...

    Args:
        samples: Normalized waveform values, nominally in [-1.0, 1.0].
        channel_count: 1 (mono) or 2 (stereo).
        sample_width: Bytes per sample.

    Returns:
        An immutable SampleBuffer.
    """
    data = bytearray()
    total_samples = 0
    for sample in samples:
        data += pack_sample(quantize(sample, sample_width), sample_width) * channel_count
        total_samples += 1

    logger.debug(
        "Encoded %d samples x %d ch at %d-bit -> %d bytes",
        total_samples, channel_count, sample_width.bits, len(data),
    )
    return SampleBuffer(
        data=bytes(data),
        total_samples=total_samples,
        channel_count=channel_count,
        sample_width=sample_width,
    )
