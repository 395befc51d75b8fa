"""Computation backends for descriptive statistics."""

from pydescstats.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = ["CPUDescriptiveBackend"]
