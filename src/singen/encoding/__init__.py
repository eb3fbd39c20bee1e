from .quantizer import SampleBuffer, encode_samples, pack_sample, quantize
from .wav import WavFormatError, WavHeader, build_wav

__all__ = [
    "SampleBuffer",
    "encode_samples",
    "pack_sample",
    "quantize",
    "WavFormatError",
    "WavHeader",
    "build_wav",
]
