"""Text renderings of an encoded buffer: summary, hex dump, C and Rust arrays."""

from __future__ import annotations

import math
from enum import Enum

from ..encoding.quantizer import SampleBuffer
from ..synthesis.models import ConfigRangeError, SignalConfig


BYTES_PER_LINE = 16


class OutputFormat(str, Enum):
    HEX = "hex"
    C_ARRAY = "carray"
    RUST_ARRAY = "rustarray"
    RAW = "raw"
    INFO = "info"
    WAV = "wav"

    @classmethod
    def from_str(cls, value: str) -> "OutputFormat":
        """Resolve a format name or alias (c, rust, bytes), case-insensitively.

        Raises:
            ConfigRangeError: for an unrecognized name.
        """
        key = value.strip().lower()
        fmt = _FORMAT_ALIASES.get(key)
        if fmt is None:
            names = ", ".join(f.value for f in cls)
            raise ConfigRangeError(f"Invalid output format {value!r}. Must be one of: {names}")
        return fmt

    @property
    def is_binary(self) -> bool:
        return self in (OutputFormat.RAW, OutputFormat.WAV)


_FORMAT_ALIASES: dict[str, OutputFormat] = {
    **{f.value: f for f in OutputFormat},
    "c":     OutputFormat.C_ARRAY,
    "rust":  OutputFormat.RUST_ARRAY,
    "bytes": OutputFormat.RAW,
}


def format_info(config: SignalConfig, buffer: SampleBuffer) -> str:
    """Human-readable configuration and buffer analysis."""
    if config.is_chirp:
        frequency_line = f"{config.frequency:g} -> {config.end_frequency:g} Hz (linear chirp)"
    else:
        frequency_line = f"{config.frequency:g} Hz"
    mode = "mono" if config.channel_count == 1 else "stereo"

    # period is measured at the start frequency; 0 Hz never completes a cycle
    period = config.sample_rate / config.frequency if config.frequency else math.inf
    cycles = buffer.total_samples / period

    lines = [
        "Sine Wave Generator - Configuration",
        "=====================================",
        f"Frequency:      {frequency_line}",
        f"Sample Rate:    {config.sample_rate} Hz",
        f"Channels:       {config.channel_count} ({mode})",
        f"Bit Depth:      {config.sample_width.label}-bit",
        f"Duration:       {config.duration_ms:g} ms",
        "",
        "Buffer Analysis:",
        f"  Samples:      {buffer.total_samples}",
        f"  Total bytes:  {buffer.total_bytes}",
        "",
        "Frequency Analysis:",
        f"  Period:       {period:.2f} samples",
        f"  Full cycles:  {cycles:.2f}",
    ]
    return "\n".join(lines)


def format_hex(data: bytes, bytes_per_line: int = BYTES_PER_LINE) -> str:
    """Bracketed ``0xHH`` dump, ``bytes_per_line`` per row, continuation rows indented one space."""
    rows = [
        ", ".join(f"0x{byte:02X}" for byte in data[i:i + bytes_per_line])
        for i in range(0, len(data), bytes_per_line)
    ]
    return "[" + "\n ".join(rows) + "]"


def array_name(config: SignalConfig) -> str:
    """Deterministic upper-case identifier, e.g. ``SINE_16000HZ_1MS_16BIT_2CH``."""
    kind = "CHIRP" if config.is_chirp else "SINE"
    return (
        f"{kind}_{config.sample_rate}HZ_{int(config.duration_ms)}MS_"
        f"{config.sample_width.label}BIT_{config.channel_count}CH"
    )


def format_c_array(config: SignalConfig, buffer: SampleBuffer) -> str:
    declaration = f"const uint8_t {array_name(config)}[{buffer.total_bytes}] = {{"
    return _format_array(config, buffer, declaration, "};")


def format_rust_array(config: SignalConfig, buffer: SampleBuffer) -> str:
    declaration = f"pub const {array_name(config)}: [u8; {buffer.total_bytes}] = ["
    return _format_array(config, buffer, declaration, "];")


def _format_array(config: SignalConfig, buffer: SampleBuffer, declaration: str, closing: str) -> str:
    plural = "s" if config.channel_count > 1 else ""
    if config.is_chirp:
        signal = f"Chirp: {config.frequency:g} -> {config.end_frequency:g} Hz"
    else:
        signal = f"Sine wave: {config.frequency:g} Hz"
    lines = [
        f"// {signal}, {config.duration_ms:g} ms, {config.sample_width.label}-bit, "
        f"{config.channel_count} channel{plural}",
        f"// Sample rate: {config.sample_rate} Hz",
        f"// Total bytes: {buffer.total_bytes}",
        declaration,
    ]

    data = buffer.data
    for start in range(0, len(data), BYTES_PER_LINE):
        chunk = data[start:start + BYTES_PER_LINE]
        row = ", ".join(f"0x{byte:02X}" for byte in chunk)
        if start + len(chunk) < len(data):
            row += ", "
        lines.append(f"    {row}")
    lines.append(closing)
    return "\n".join(lines)
