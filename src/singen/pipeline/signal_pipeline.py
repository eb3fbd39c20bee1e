"""Test-vector generation pipeline.

SignalConfig → oscillator or chirp → quantized PCM → WAV / raw / text rendering.
"""

from __future__ import annotations

import logging

from ..encoding.quantizer import SampleBuffer, encode_samples
from ..encoding.wav import build_wav
from ..output.formatters import (
    OutputFormat,
    format_c_array,
    format_hex,
    format_info,
    format_rust_array,
)
from ..synthesis.chirp import ChirpGenerator
from ..synthesis.models import SignalConfig
from ..synthesis.oscillator import SineOscillator

logger = logging.getLogger(__name__)

_SECTION_TITLES: dict[OutputFormat, str] = {
    OutputFormat.HEX:        "Buffer data (hexadecimal):",
    OutputFormat.C_ARRAY:    "C array declaration:",
    OutputFormat.RUST_ARRAY: "Rust array declaration:",
}


class SignalPipeline:
    """Generate one buffer for a SignalConfig and render it in any output format.

    The buffer is computed once, on first use, and reused by every rendering.
    """

    def __init__(self, config: SignalConfig) -> None:
        self.config = config
        self._buffer: SampleBuffer | None = None

    def generate_samples(self) -> list[float]:
        """Normalized samples from the steady-tone oscillator or the chirp generator."""
        config = self.config
        if config.is_chirp:
            logger.debug(
                "Chirp %g -> %g Hz, %d samples @ %d Hz",
                config.frequency, config.end_frequency, config.total_samples, config.sample_rate,
            )
            return ChirpGenerator.for_config(config).samples(config.total_samples)

        logger.debug(
            "Tone %g Hz, %d samples @ %d Hz",
            config.frequency, config.total_samples, config.sample_rate,
        )
        return SineOscillator.for_config(config).samples(config.total_samples)

    def encode(self) -> SampleBuffer:
        if self._buffer is None:
            self._buffer = encode_samples(
                self.generate_samples(),
                channel_count=self.config.channel_count,
                sample_width=self.config.sample_width,
            )
        return self._buffer

    def to_raw(self) -> bytes:
        return self.encode().data

    def to_wav(self) -> bytes:
        return build_wav(self.encode(), self.config.sample_rate)

    def render(self, output_format: OutputFormat) -> str | bytes:
        """Render the buffer: ``bytes`` for raw/wav, ``str`` for everything else.

        Text formats other than ``info`` are prefixed with the info summary.
        """
        if output_format is OutputFormat.RAW:
            return self.to_raw()
        if output_format is OutputFormat.WAV:
            return self.to_wav()

        buffer = self.encode()
        summary = format_info(self.config, buffer)
        if output_format is OutputFormat.INFO:
            return summary

        if output_format is OutputFormat.HEX:
            body = format_hex(buffer.data)
        elif output_format is OutputFormat.C_ARRAY:
            body = format_c_array(self.config, buffer)
        else:
            body = format_rust_array(self.config, buffer)
        return f"{summary}\n\n{_SECTION_TITLES[output_format]}\n{body}"
