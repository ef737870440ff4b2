"""StorageEntry abstraction for bfwalk.

A StorageEntry is intentionally kept simple - it describes one object in
the storage tree. Navigation (listing children, resolving paths) is the
job of the StorageProvider, which is what lets the walkers run over any
hierarchical storage.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class StorageEntry(ABC):
    """Abstract descriptor for one object in a storage tree.

    Entries are owned by the storage provider. The walkers only read
    them: the base name to build child paths and sort siblings, and the
    directory flag to decide whether to descend.
    """

    @abstractmethod
    def name(self) -> str:
        """Return the base name of this entry.

        This is the last path component, without any separators.
        Siblings are visited in ascending order of this name.

        Returns:
            str: Base name of the entry
        """
        pass

    @abstractmethod
    def is_dir(self) -> bool:
        """Check if this entry is a directory.

        Returns:
            bool: True if the walker may list children for this entry
        """
        pass

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this entry.

        Providers override this to expose whatever they gather cheaply
        (size, modification time, mode). The walkers never call it.

        Returns:
            Dict[str, Any]: Metadata dictionary, empty by default
        """
        return {}

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        kind = "dir" if self.is_dir() else "file"
        return f"{self.__class__.__name__}(name={self.name()!r}, {kind})"

    def __eq__(self, other: object) -> bool:
        """Entries are equal if name and directory flag match."""
        if not isinstance(other, StorageEntry):
            return NotImplemented
        return self.name() == other.name() and self.is_dir() == other.is_dir()

    def __hash__(self) -> int:
        return hash((self.name(), self.is_dir()))


class SimpleEntry(StorageEntry):
    """Plain value entry for providers that already know everything.

    Example:
        >>> entry = SimpleEntry("notes.txt", is_dir=False, size=12)
        >>> entry.metadata()["size"]
        12
    """

    def __init__(self, name: str, is_dir: bool = False, **metadata: Any):
        self._name = name
        self._is_dir = is_dir
        self._metadata = metadata

    def name(self) -> str:
        return self._name

    def is_dir(self) -> bool:
        return self._is_dir

    def metadata(self) -> Dict[str, Any]:
        return dict(self._metadata)
