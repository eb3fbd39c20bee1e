"""Sine tone and chirp PCM test-vector generator."""

__version__ = "0.1.0"
