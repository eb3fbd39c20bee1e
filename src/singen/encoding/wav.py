"""Canonical 44-byte RIFF/WAVE PCM header builder.

Layout (all multi-byte integers little-endian, no padding):

  offset  size  field
  ------  ----  ---------------------------------------------
     0     4    "RIFF"
     4     4    chunk_size        = 36 + data_size
     8     4    "WAVE"
    12     4    "fmt "
    16     4    subchunk1_size    = 16
    20     2    audio_format      = 1 (PCM)
    22     2    num_channels
    24     4    sample_rate
    28     4    byte_rate         = sample_rate * block_align
    32     2    block_align       = num_channels * bytes_per_sample
    34     2    bits_per_sample
    36     4    "data"
    40     4    subchunk2_size    = data_size
    44     -    PCM data
"""

from __future__ import annotations

import struct

from pydantic import BaseModel, ConfigDict

from ..synthesis.models import SampleWidth
from .quantizer import SampleBuffer


HEADER_SIZE = 44
PCM_FMT_CHUNK_SIZE = 16
WAVE_FORMAT_PCM = 1

_RIFF_TAG = b"RIFF"
_WAVE_TAG = b"WAVE"
_FMT_TAG  = b"fmt "
_DATA_TAG = b"data"

# (offset, struct format) for every numeric field
_FIELD_LAYOUT: dict[str, tuple[int, str]] = {
    "chunk_size":      (4,  "<I"),
    "subchunk1_size":  (16, "<I"),
    "audio_format":    (20, "<H"),
    "num_channels":    (22, "<H"),
    "sample_rate":     (24, "<I"),
    "byte_rate":       (28, "<I"),
    "block_align":     (32, "<H"),
    "bits_per_sample": (34, "<H"),
    "subchunk2_size":  (40, "<I"),
}
_TAG_LAYOUT: dict[int, bytes] = {
    0:  _RIFF_TAG,
    8:  _WAVE_TAG,
    12: _FMT_TAG,
    36: _DATA_TAG,
}


class WavFormatError(ValueError):
    """Raised when bytes do not start with a canonical PCM WAV header."""


class WavHeader(BaseModel):
    """Field values of a canonical PCM WAV header."""

    model_config = ConfigDict(frozen=True)

    chunk_size: int
    subchunk1_size: int = PCM_FMT_CHUNK_SIZE
    audio_format: int = WAVE_FORMAT_PCM
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    subchunk2_size: int

    @classmethod
    def for_pcm(
        cls,
        data_size: int,
        sample_rate: int,
        channel_count: int,
        sample_width: SampleWidth,
    ) -> "WavHeader":
        """Derive every header field from the PCM payload size and format."""
        block_align = channel_count * sample_width.byte_width
        return cls(
            chunk_size=36 + data_size,
            num_channels=channel_count,
            sample_rate=sample_rate,
            byte_rate=sample_rate * block_align,
            block_align=block_align,
            bits_per_sample=sample_width.bits,
            subchunk2_size=data_size,
        )

    def to_bytes(self) -> bytes:
        """Serialize each field at its fixed offset."""
        header = bytearray(HEADER_SIZE)
        for offset, tag in _TAG_LAYOUT.items():
            header[offset:offset + 4] = tag
        for name, (offset, fmt) in _FIELD_LAYOUT.items():
            struct.pack_into(fmt, header, offset, getattr(self, name))
        return bytes(header)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "WavHeader":
        """Parse the first 44 bytes of a canonical PCM WAV file.

        Raises:
            WavFormatError: if the input is short or any chunk tag is wrong.
        """
        if len(raw) < HEADER_SIZE:
            raise WavFormatError(f"WAV header needs {HEADER_SIZE} bytes, got {len(raw)}")

        errors: list[str] = []
        for offset, tag in _TAG_LAYOUT.items():
            found = bytes(raw[offset:offset + 4])
            if found != tag:
                errors.append(f"expected {tag!r} at offset {offset}, found {found!r}")
        if errors:
            raise WavFormatError("Not a canonical WAV header: " + "; ".join(errors))

        fields = {
            name: struct.unpack_from(fmt, raw, offset)[0]
            for name, (offset, fmt) in _FIELD_LAYOUT.items()
        }
        return cls(**fields)


def build_wav(buffer: SampleBuffer, sample_rate: int) -> bytes:
    """Wrap an encoded buffer in a minimal RIFF/WAVE container."""
    header = WavHeader.for_pcm(
        data_size=buffer.total_bytes,
        sample_rate=sample_rate,
        channel_count=buffer.channel_count,
        sample_width=buffer.sample_width,
    )
    return header.to_bytes() + buffer.data
