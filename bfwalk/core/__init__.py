"""Core abstractions for bfwalk.

This package contains the storage abstractions, the visitor signals and
the walkers built on top of them.
"""

from .entry import StorageEntry, SimpleEntry
from .storage import StorageProvider
from .signals import Signal, SKIP_DIR, SKIP_ALL, Visitor, classify_result
from .walker import walk_dir, walk_dir_depth_first

__all__ = [
    "StorageEntry",
    "SimpleEntry",
    "StorageProvider",
    "Signal",
    "SKIP_DIR",
    "SKIP_ALL",
    "Visitor",
    "classify_result",
    "walk_dir",
    "walk_dir_depth_first",
]
