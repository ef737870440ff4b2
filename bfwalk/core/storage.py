"""StorageProvider abstraction for bfwalk.

The StorageProvider supplies the two operations a walk needs: resolving
the root to an entry and listing the immediate children of a directory.
Everything else about the storage (real disk, memory, archives, object
stores) stays behind this interface.
"""

import posixpath
from abc import ABC, abstractmethod
from typing import Iterable, List
from .entry import StorageEntry


class StorageProvider(ABC):
    """Abstract provider for navigating a hierarchical storage tree.

    Providers report failures by raising ``OSError`` (or a subclass such
    as ``FileNotFoundError``). The walkers catch those and hand them to
    the caller's visitor; they never swallow them.
    """

    @abstractmethod
    def resolve(self, path: str) -> StorageEntry:
        """Resolve a path to its entry, following symbolic links.

        Only the traversal root is resolved through this method, so it
        is the one place link resolution happens during a walk.

        Args:
            path: Path to resolve

        Returns:
            StorageEntry describing the (link-resolved) object

        Raises:
            OSError: If the path cannot be resolved
        """
        pass

    @abstractmethod
    def list_children(self, path: str) -> Iterable[StorageEntry]:
        """List the immediate children of a directory.

        Order does not matter; ``read_dir`` sorts. Symbolic links among
        the children must not be followed: a link is reported as a
        non-directory entry.

        Args:
            path: Directory path

        Returns:
            Iterable of child StorageEntry instances

        Raises:
            OSError: If the directory cannot be listed
        """
        pass

    def read_dir(self, path: str) -> List[StorageEntry]:
        """List children of a directory sorted by name.

        The whole listing is buffered before it is returned, so traversal
        order never depends on the provider's native enumeration order.
        Listing is all-or-nothing: an error while enumerating discards
        whatever was read so far.

        Args:
            path: Directory path

        Returns:
            Children sorted by ``name()``

        Raises:
            OSError: If the directory cannot be listed
        """
        return sorted(self.list_children(path), key=lambda entry: entry.name())

    def join(self, parent: str, name: str) -> str:
        """Build a child path from its parent path and base name.

        Default implementation joins with ``/`` and treats ``.`` as the
        empty prefix, so a walk rooted at ``.`` yields ``a``, ``a/b``.
        Providers for native paths can override this.

        Args:
            parent: Path of the parent directory
            name: Base name of the child

        Returns:
            Path of the child
        """
        if parent in ("", "."):
            return name
        return posixpath.join(parent, name)
