from .models import (
    SUPPORTED_SAMPLE_RATES,
    ConfigError,
    ConfigParseError,
    ConfigRangeError,
    SampleWidth,
    SignalConfig,
    UnknownFlagError,
)
from .oscillator import SineOscillator
from .chirp import ChirpGenerator

__all__ = [
    "SUPPORTED_SAMPLE_RATES",
    "ConfigError",
    "ConfigParseError",
    "ConfigRangeError",
    "SampleWidth",
    "SignalConfig",
    "UnknownFlagError",
    "SineOscillator",
    "ChirpGenerator",
]
