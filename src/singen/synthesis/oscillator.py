"""Constant-frequency sine oscillator driven by a wrapped phase accumulator."""

from __future__ import annotations

import math
from collections.abc import Iterator

from .models import SignalConfig

TWO_PI = 2.0 * math.pi


def wrap_phase(phase: float) -> float:
    """Wrap ``phase`` into [0, 2π).

    Float ``%`` can round a tiny negative operand up to exactly 2π, which
    is folded back to 0.0.
    """
    phase %= TWO_PI
    return 0.0 if phase >= TWO_PI else phase


class SineOscillator:
    """Generate a steady sine tone one sample at a time.

    The phase is advanced by a fixed increment per sample and wrapped into
    [0, 2π) after every step, so it never grows with buffer length.
    """

    def __init__(self, frequency: float, sample_rate: int) -> None:
        self.frequency = frequency
        self.sample_rate = sample_rate
        self.phase_increment = TWO_PI * frequency / sample_rate

    @classmethod
    def for_config(cls, config: SignalConfig) -> "SineOscillator":
        return cls(config.frequency, config.sample_rate)

    def phases(self, total_samples: int) -> Iterator[float]:
        """Yield the phase (radians) at each of ``total_samples`` sample boundaries."""
        phase = 0.0
        for _ in range(total_samples):
            yield phase
            phase = wrap_phase(phase + self.phase_increment)

    def samples(self, total_samples: int) -> list[float]:
        """Return ``total_samples`` normalized values in [-1.0, 1.0]."""
        return [math.sin(phase) for phase in self.phases(total_samples)]
