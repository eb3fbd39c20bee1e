"""Example: generate a set of firmware test vectors in one go.

Writes, into ./vectors (or the directory given as the first argument):
  - a 1 kHz stereo 16-bit tone as a C header
  - the same tone as a WAV file for listening
  - a 20 Hz -> 20 kHz mono 24-bit sweep as a WAV file

Usage:
    python examples/generate_test_vectors.py [OUTPUT_DIR]
"""

from __future__ import annotations

import sys
from pathlib import Path

# Make sure the package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from singen.output.formatters import OutputFormat
from singen.pipeline import SignalPipeline
from singen.synthesis.models import SampleWidth, SignalConfig


TONE = SignalConfig(
    frequency=1000.0,
    sample_rate=48_000,
    channel_count=2,
    sample_width=SampleWidth.WIDTH_2_BYTE,
    duration_ms=10.0,
)

SWEEP = SignalConfig(
    frequency=20.0,
    end_frequency=20_000.0,
    sample_rate=48_000,
    channel_count=1,
    sample_width=SampleWidth.WIDTH_3_BYTE,
    duration_ms=2_000.0,
)


def main(out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    tone = SignalPipeline(TONE)
    header = out_dir / "sine_1khz.h"
    header.write_text(tone.render(OutputFormat.C_ARRAY) + "\n", encoding="utf-8")
    (out_dir / "sine_1khz.wav").write_bytes(tone.to_wav())

    sweep = SignalPipeline(SWEEP)
    (out_dir / "sweep_20hz_20khz.wav").write_bytes(sweep.to_wav())

    print(tone.render(OutputFormat.INFO))
    print()
    print(sweep.render(OutputFormat.INFO))
    print(f"\nWrote vectors to {out_dir}")


if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else Path("vectors"))
