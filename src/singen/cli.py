"""singen command line.

Run with: singen [OPTIONS]

Exit codes: 0 on success or --help, 1 on any configuration error.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

from pydantic import ValidationError

from .output.formatters import OutputFormat
from .pipeline.signal_pipeline import SignalPipeline
from .settings import GeneratorSettings
from .synthesis.models import (
    SUPPORTED_SAMPLE_RATES,
    ConfigError,
    ConfigParseError,
    ConfigRangeError,
    SampleWidth,
    SignalConfig,
    UnknownFlagError,
)

logger = logging.getLogger("singen")

_EPILOG = """\
output formats:
  hex        hexadecimal values (default)
  carray     C-style array declaration
  rustarray  Rust array declaration
  raw        raw binary bytes
  wav        RIFF/WAVE file bytes
  info       only show buffer info, no data

examples:
  singen -f 1000 -r 48000 -b 16 -d 10 -o carray
  singen --frequency 440 --rate 44100 --channels 1 --bits 24
  singen -f 100 -e 4000 -r 48000 -c 1 -d 500 -o wav -w sweep.wav
"""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UnknownFlagError(message)


def build_parser() -> argparse.ArgumentParser:
    rates = ", ".join(str(r) for r in sorted(SUPPORTED_SAMPLE_RATES))
    parser = _Parser(
        prog="singen",
        description="Generate sine tone and chirp PCM test vectors.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-f", "--frequency", metavar="FREQ", help="sine (or chirp start) frequency in Hz (default: 440.0)")
    parser.add_argument("-e", "--end-frequency", metavar="FREQ", help="chirp end frequency in Hz (default: same as --frequency)")
    parser.add_argument("-r", "--rate", metavar="RATE", help=f"sample rate in Hz (default: 16000; recommended: {rates})")
    parser.add_argument("-c", "--channels", metavar="CH", help="number of channels, 1=mono 2=stereo (default: 2)")
    parser.add_argument("-b", "--bits", metavar="BITS", help="bit depth: 16, 24, or 32 (default: 16)")
    parser.add_argument("-d", "--duration", metavar="MS", help="duration in milliseconds (default: 1.0)")
    parser.add_argument("-o", "--output", metavar="FORMAT", help="output format (default: hex)")
    parser.add_argument("-a", "--analyze", action="store_true", help="analyze only (same as -o info)")
    parser.add_argument("-w", "--out-file", type=Path, default=None, help="write output to a file instead of stdout")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def _setup_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)-24s %(levelname)-7s %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


def _parse_float(field: str, value: object) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ConfigParseError(field, value) from None
    if not math.isfinite(number):
        raise ConfigParseError(field, value)
    return number


def _parse_unsigned(field: str, value: object) -> int:
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ConfigParseError(field, value) from None
    if number < 0:
        raise ConfigParseError(field, value)
    return number


def build_config(args: argparse.Namespace, settings: GeneratorSettings | None = None) -> SignalConfig:
    """Validate parsed arguments (falling back to settings) into a SignalConfig.

    Raises:
        ConfigParseError: a numeric value does not parse.
        ConfigRangeError: channels, bit depth, rate or duration out of range.
    """
    settings = settings or GeneratorSettings()

    def pick(flag_value: object, default: object) -> object:
        return default if flag_value is None else flag_value

    frequency = _parse_float("frequency", pick(args.frequency, settings.frequency))
    end_value = pick(args.end_frequency, settings.end_frequency)
    end_frequency = frequency if end_value is None else _parse_float("end frequency", end_value)

    sample_rate = _parse_unsigned("sample rate", pick(args.rate, settings.sample_rate))
    if sample_rate == 0:
        raise ConfigRangeError("Sample rate must be greater than 0")
    if sample_rate not in SUPPORTED_SAMPLE_RATES:
        logger.warning("%d Hz is not in the standard supported rates list", sample_rate)

    channels = _parse_unsigned("channel count", pick(args.channels, settings.channels))
    if channels not in (1, 2):
        raise ConfigRangeError("Channel count must be 1 or 2")

    sample_width = SampleWidth.from_bits(pick(args.bits, settings.bits))  # type: ignore[arg-type]

    duration_ms = _parse_float("duration", pick(args.duration, settings.duration_ms))
    if duration_ms < 0:
        raise ConfigRangeError("Duration must not be negative")

    return SignalConfig(
        frequency=frequency,
        end_frequency=end_frequency,
        sample_rate=sample_rate,
        channel_count=channels,
        sample_width=sample_width,
        duration_ms=duration_ms,
    )


def resolve_output_format(args: argparse.Namespace, settings: GeneratorSettings | None = None) -> OutputFormat:
    settings = settings or GeneratorSettings()
    output_format = OutputFormat.from_str(args.output if args.output is not None else settings.output)
    return OutputFormat.INFO if args.analyze else output_format


def _emit(rendered: str | bytes, out_file: Path | None) -> None:
    if isinstance(rendered, bytes):
        if out_file is not None:
            out_file.write_bytes(rendered)
        else:
            sys.stdout.buffer.write(rendered)
            sys.stdout.buffer.flush()
        return

    if out_file is not None:
        out_file.write_text(rendered + "\n", encoding="utf-8")
    else:
        print(rendered)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UnknownFlagError as exc:
        parser.print_usage(sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _setup_logging(args.debug)

    try:
        settings = GeneratorSettings()
        config = build_config(args, settings)
        output_format = resolve_output_format(args, settings)
    except (ConfigError, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Config: %s, output=%s", config, output_format.value)
    rendered = SignalPipeline(config).render(output_format)
    _emit(rendered, args.out_file)
    if args.out_file is not None:
        logger.info("Wrote %s", args.out_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
