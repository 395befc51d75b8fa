"""Computation backends for frequency distributions."""

from pydescstats.frequency.backends.cpu import CPUFrequencyBackend

__all__ = ["CPUFrequencyBackend"]
