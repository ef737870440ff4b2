"""Filesystem storage provider for bfwalk.

This provider lets the walkers run over the real filesystem. Listing
uses ``os.scandir`` and never follows symbolic links among the children;
only the root is resolved through a link.
"""

import os
import stat
from datetime import datetime
from typing import Any, Dict, Iterator, Optional
from ..core.entry import StorageEntry
from ..core.storage import StorageProvider


class OSEntry(StorageEntry):
    """Concrete entry for a filesystem object.

    Designed to be lightweight - metadata is computed on demand, from the
    stat result gathered while listing when one is available.
    """

    def __init__(self,
                 path: str,
                 is_dir: bool,
                 stat_result: Optional[os.stat_result] = None,
                 is_link: bool = False):
        """Initialize a filesystem entry.

        Args:
            path: Path to the file or directory
            is_dir: Whether the object is a directory (links not followed)
            stat_result: Cached stat result to avoid repeated syscalls
            is_link: Whether the object is a symbolic link
        """
        self.path = path
        self._is_dir = is_dir
        self._stat_result = stat_result
        self._is_link = is_link
        self._metadata = None

    @classmethod
    def from_dir_entry(cls, dir_entry: os.DirEntry) -> 'OSEntry':
        """Build an entry from an ``os.scandir`` result without following links."""
        return cls(
            dir_entry.path,
            is_dir=dir_entry.is_dir(follow_symlinks=False),
            is_link=dir_entry.is_symlink(),
        )

    def name(self) -> str:
        return os.path.basename(os.path.normpath(self.path)) or self.path

    def is_dir(self) -> bool:
        return self._is_dir

    def metadata(self) -> Dict[str, Any]:
        """Return filesystem metadata for this entry."""
        if self._metadata is None:
            self._metadata = self._compute_metadata()
        return self._metadata

    def _compute_metadata(self) -> Dict[str, Any]:
        metadata = {
            'name': self.name(),
            'path': self.path,
            'is_dir': self._is_dir,
            'is_link': self._is_link,
        }

        try:
            if self._stat_result is None:
                self._stat_result = os.lstat(self.path)
            st = self._stat_result
        except OSError as e:
            metadata['error'] = str(e)
            return metadata

        metadata.update({
            'size': st.st_size,
            'mtime': st.st_mtime,
            'mtime_dt': datetime.fromtimestamp(st.st_mtime),
            'mode': st.st_mode,
            'is_file': stat.S_ISREG(st.st_mode),
        })

        if metadata['is_file']:
            metadata['extension'] = os.path.splitext(self.path)[1]

        return metadata

    def __repr__(self) -> str:
        return f"OSEntry(path={self.path!r}, is_dir={self._is_dir})"


class OSStorage(StorageProvider):
    """Storage provider for the real filesystem.

    Paths are joined with ``os.path.join`` so the walkers report native
    paths rooted at whatever the caller passed in.
    """

    def __init__(self, include_hidden: bool = True):
        """Initialize filesystem storage.

        Args:
            include_hidden: Whether to list entries whose name starts with '.'
        """
        self.include_hidden = include_hidden

    def resolve(self, path: str) -> OSEntry:
        """Stat path, following a symbolic link."""
        st = os.stat(path)
        return OSEntry(path, is_dir=stat.S_ISDIR(st.st_mode), stat_result=st,
                       is_link=os.path.islink(path))

    def list_children(self, path: str) -> Iterator[OSEntry]:
        """List directory entries without following links."""
        with os.scandir(path) as it:
            entries = [OSEntry.from_dir_entry(dir_entry) for dir_entry in it]
        if not self.include_hidden:
            entries = [entry for entry in entries if not entry.name().startswith('.')]
        return iter(entries)

    def join(self, parent: str, name: str) -> str:
        return os.path.join(parent, name)
