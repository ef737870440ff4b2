"""Storage providers for specific storage types.

Providers implement the StorageProvider interface so the walkers can run
over them.
"""

from .filesystem import OSStorage, OSEntry

__all__ = [
    "OSStorage",
    "OSEntry",
]
