"""Linear frequency sweep (chirp) generator.

Unlike SineOscillator, the phase increment is recomputed for every sample
from the instantaneous frequency:

    f(t)   = f0 + (f1 - f0) * t / duration
    phase += 2π * f(t) / sample_rate      (wrapped into [0, 2π))
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from .models import SignalConfig, round_half_away
from .oscillator import TWO_PI, wrap_phase


class ChirpGenerator:
    """Sweep linearly from ``start_frequency`` to ``end_frequency`` over ``duration_secs``."""

    def __init__(
        self,
        start_frequency: float,
        end_frequency: float,
        sample_rate: int,
        duration_secs: float,
    ) -> None:
        self.start_frequency = start_frequency
        self.end_frequency = end_frequency
        self.sample_rate = sample_rate
        self.duration_secs = duration_secs

    @classmethod
    def for_config(cls, config: SignalConfig) -> "ChirpGenerator":
        return cls(
            start_frequency=config.frequency,
            end_frequency=config.end_frequency,
            sample_rate=config.sample_rate,
            duration_secs=config.duration_secs,
        )

    @property
    def sample_count(self) -> int:
        return round_half_away(self.duration_secs * self.sample_rate)

    def instantaneous_frequency(self, t: float) -> float:
        """Frequency in Hz at time ``t`` seconds into the sweep."""
        if self.duration_secs == 0:
            return self.start_frequency
        sweep = self.end_frequency - self.start_frequency
        return self.start_frequency + sweep * (t / self.duration_secs)

    def phases(self, total_samples: int | None = None) -> Iterator[float]:
        """Yield the phase at each sample boundary. Zero duration yields nothing.

        ``total_samples`` overrides ``sample_count`` so callers holding a
        SignalConfig can reuse its millisecond-based count.
        """
        if self.duration_secs == 0:
            return
        count = self.sample_count if total_samples is None else total_samples
        dt = 1.0 / self.sample_rate
        phase = 0.0
        for i in range(count):
            yield phase
            t = i / self.sample_rate
            phase = wrap_phase(phase + TWO_PI * self.instantaneous_frequency(t) * dt)

    def samples(self, total_samples: int | None = None) -> list[float]:
        """Return the sweep as normalized values in [-1.0, 1.0]."""
        return [math.sin(phase) for phase in self.phases(total_samples)]
