"""Computation backends for grouped-data estimation."""

from pydescstats.grouped.backends.cpu import CPUGroupedBackend

__all__ = ["CPUGroupedBackend"]
