"""Unit tests for argument parsing, validation, and exit codes."""

from __future__ import annotations

import logging
import runpy
import sys

import pytest

from singen.cli import build_config, build_parser, main, resolve_output_format
from singen.output.formatters import OutputFormat
from singen.settings import GeneratorSettings
from singen.synthesis.models import (
    ConfigParseError,
    ConfigRangeError,
    SampleWidth,
    UnknownFlagError,
)

pytestmark = pytest.mark.usefixtures("clean_env")


def _config(*argv: str):
    return build_config(build_parser().parse_args(list(argv)))


class TestParser:
    def test_parser_builds(self) -> None:
        assert build_parser().prog == "singen"

    def test_unknown_flag_raises(self) -> None:
        with pytest.raises(UnknownFlagError):
            build_parser().parse_args(["--volume", "3"])

    def test_abbreviated_long_flag_is_unknown(self) -> None:
        with pytest.raises(UnknownFlagError):
            build_parser().parse_args(["--freq", "100"])

    def test_missing_value_raises(self) -> None:
        with pytest.raises(UnknownFlagError):
            build_parser().parse_args(["-f"])


class TestBuildConfig:
    def test_defaults(self) -> None:
        config = _config()
        assert config.frequency == 440.0
        assert config.sample_rate == 16_000
        assert config.channel_count == 2
        assert config.sample_width is SampleWidth.WIDTH_2_BYTE
        assert config.duration_ms == 1.0
        assert not config.is_chirp

    def test_long_flags(self) -> None:
        config = _config(
            "--frequency", "1000", "--rate", "48000", "--channels", "1",
            "--bits", "24", "--duration", "10",
        )
        assert config.frequency == 1000.0
        assert config.sample_rate == 48_000
        assert config.channel_count == 1
        assert config.sample_width is SampleWidth.WIDTH_3_BYTE
        assert config.duration_ms == 10.0

    def test_end_frequency_makes_chirp(self) -> None:
        config = _config("-f", "100", "-e", "8000")
        assert config.end_frequency == 8000.0
        assert config.is_chirp

    @pytest.mark.parametrize(
        "argv, field",
        [
            (("-f", "abc"), "frequency"),
            (("-f", "nan"), "frequency"),
            (("-e", "fast"), "end frequency"),
            (("-r", "44.1k"), "sample rate"),
            (("-r", "-8000"), "sample rate"),
            (("-c", "two"), "channel count"),
            (("-d", "1ms"), "duration"),
        ],
    )
    def test_parse_errors_name_the_field(self, argv: tuple[str, ...], field: str) -> None:
        with pytest.raises(ConfigParseError) as excinfo:
            _config(*argv)
        assert excinfo.value.field == field

    @pytest.mark.parametrize(
        "argv",
        [("-c", "3"), ("-c", "0"), ("-b", "8"), ("-r", "0"), ("-d", "-5")],
    )
    def test_range_errors(self, argv: tuple[str, ...]) -> None:
        with pytest.raises(ConfigRangeError):
            _config(*argv)

    def test_unusual_rate_warns_but_continues(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="singen"):
            config = _config("-r", "22050")
        assert config.sample_rate == 22_050
        assert "22050 Hz is not in the standard supported rates list" in caplog.text

    def test_recommended_rate_does_not_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="singen"):
            _config("-r", "44100")
        assert caplog.text == ""

    def test_settings_supply_defaults(self) -> None:
        args = build_parser().parse_args(["-c", "1"])
        settings = GeneratorSettings(sample_rate=48_000, channels=2, bits=32)
        config = build_config(args, settings)
        assert config.sample_rate == 48_000
        assert config.channel_count == 1
        assert config.sample_width is SampleWidth.WIDTH_4_BYTE

    def test_environment_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SINGEN_SAMPLE_RATE", "44100")
        monkeypatch.setenv("SINGEN_BITS", "24")
        config = _config()
        assert config.sample_rate == 44_100
        assert config.sample_width is SampleWidth.WIDTH_3_BYTE


class TestResolveOutputFormat:
    def test_default_is_hex(self) -> None:
        assert resolve_output_format(build_parser().parse_args([])) is OutputFormat.HEX

    def test_analyze_forces_info(self) -> None:
        args = build_parser().parse_args(["-o", "wav", "-a"])
        assert resolve_output_format(args) is OutputFormat.INFO

    def test_invalid_format(self) -> None:
        with pytest.raises(ConfigRangeError):
            resolve_output_format(build_parser().parse_args(["-o", "flac"]))


class TestExitCodes:
    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-o", "info"]) == 0
        assert "Sine Wave Generator - Configuration" in capsys.readouterr().out

    def test_help_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--help"])
        assert excinfo.value.code == 0
        assert "usage: singen" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "argv",
        [
            ["-f", "abc"],
            ["-c", "5"],
            ["-b", "12"],
            ["-o", "ogg"],
            ["-r", "x"],
        ],
    )
    def test_validation_failures_exit_one(self, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        assert main(argv) == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_unknown_flag_prints_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--bogus"]) == 1
        err = capsys.readouterr().err
        assert "usage: singen" in err
        assert "--bogus" in err

    def test_abbreviated_flag_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--freq", "100"]) == 1
        assert "--freq" in capsys.readouterr().err

    def test_module_entry_point(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr(sys, "argv", ["singen", "-o", "info"])
        with pytest.raises(SystemExit) as excinfo:
            runpy.run_module("singen", run_name="__main__")
        assert excinfo.value.code == 0
        assert "Sine Wave Generator - Configuration" in capsys.readouterr().out

    def test_bad_environment_value_exits_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("SINGEN_CHANNELS", "stereo")
        assert main(["-o", "info"]) == 1
        assert "Error:" in capsys.readouterr().err
