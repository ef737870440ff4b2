"""Testing utilities for bfwalk consumers."""

from .fixtures import MemoryStorage, VisitRecorder

__all__ = ['MemoryStorage', 'VisitRecorder']
