"""Test fixtures for bfwalk consumers.

These fixtures provide a synthetic storage tree and a recording visitor,
so walks can be tested without touching the real filesystem.
"""

import errno
import os
import posixpath
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from ..core.entry import SimpleEntry, StorageEntry
from ..core.signals import VisitResult
from ..core.storage import StorageProvider

_MAX_LINK_HOPS = 40


def _clean(path: str) -> str:
    path = posixpath.normpath(path.replace("\\", "/"))
    return path.lstrip("/") or "."


class MemoryStorage(StorageProvider):
    """In-memory storage tree built from a mapping of file paths.

    Parent directories are implied by the file paths. A key ending in
    ``/`` creates an empty directory. Paths are slash-separated and
    relative to the tree root ``.``.

    Example:
        storage = MemoryStorage({
            "root/file1.txt": "",
            "root/dirA/file1.txt": b"data",
            "root/empty/": None,
        })
        walk_dir(storage, "root", visit)

    Args:
        files: Mapping of path to content (str, bytes or None)
        links: Mapping of link path to target path. Links are followed
            when resolving a path and are listed as non-directories.
        fail_listing: Mapping of directory path to the OSError
            ``list_children`` raises for it

    Raises:
        TypeError: If a fail_listing value is not an OSError
    """

    def __init__(self,
                 files: Optional[Mapping[str, Union[str, bytes, None]]] = None,
                 links: Optional[Mapping[str, str]] = None,
                 fail_listing: Optional[Mapping[str, OSError]] = None):
        self._files: Dict[str, bytes] = {}
        self._dirs: Dict[str, Dict[str, None]] = {".": {}}
        self._links: Dict[str, str] = {}
        for path, exc in (fail_listing or {}).items():
            if not isinstance(exc, OSError):
                raise TypeError(f"fail_listing[{path!r}] must be an OSError, got {type(exc).__name__}")
        self._fail_listing = {_clean(path): exc for path, exc in (fail_listing or {}).items()}
        self.listed: List[str] = []

        for path, content in (files or {}).items():
            if path.endswith("/"):
                self.add_dir(path)
            else:
                self.add_file(path, content)
        for path, target in (links or {}).items():
            self.add_link(path, target)

    # Building

    def add_dir(self, path: str) -> None:
        path = _clean(path)
        if path in self._dirs:
            return
        self._dirs[path] = {}
        self._attach(path)

    def add_file(self, path: str, content: Union[str, bytes, None] = b"") -> None:
        path = _clean(path)
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._files[path] = content or b""
        self._attach(path)

    def add_link(self, path: str, target: str) -> None:
        path = _clean(path)
        self._links[path] = _clean(target)
        self._attach(path)

    def _attach(self, path: str) -> None:
        """Register path with its parent, creating missing ancestors."""
        while path != ".":
            parent, name = posixpath.split(path)
            parent = parent or "."
            known = parent in self._dirs
            self._dirs.setdefault(parent, {})[name] = None
            if known:
                break
            path = parent

    # StorageProvider

    def resolve(self, path: str) -> StorageEntry:
        target = self._follow(path)
        name = posixpath.basename(_clean(path)) or "."
        if target in self._dirs:
            return SimpleEntry(name, is_dir=True)
        if target in self._files:
            return SimpleEntry(name, is_dir=False, size=len(self._files[target]))
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)

    def list_children(self, path: str) -> Iterable[StorageEntry]:
        """List children in insertion order; ``read_dir`` sorts them."""
        self.listed.append(path)
        target = self._follow(path)
        if target in self._fail_listing:
            raise self._fail_listing[target]
        if target in self._files:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        if target not in self._dirs:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        return [self._child_entry(target, name) for name in self._dirs[target]]

    def _child_entry(self, parent: str, name: str) -> StorageEntry:
        path = name if parent == "." else f"{parent}/{name}"
        if path in self._links:
            return SimpleEntry(name, is_dir=False, link=self._links[path])
        if path in self._dirs:
            return SimpleEntry(name, is_dir=True)
        return SimpleEntry(name, is_dir=False, size=len(self._files[path]))

    def _follow(self, path: str) -> str:
        """Resolve links in every component of path."""
        current = "."
        hops = 0
        for part in _clean(path).split("/"):
            current = part if current == "." else f"{current}/{part}"
            while current in self._links:
                hops += 1
                if hops > _MAX_LINK_HOPS:
                    raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), path)
                current = self._links[current]
        return current


class VisitRecorder:
    """Visitor that records every call and answers with canned signals.

    Example:
        recorder = VisitRecorder(signals={"root/dirB": SKIP_DIR})
        walk_dir(storage, "root", recorder)
        assert recorder.visited == ["root", "root/dirA", ...]

    Args:
        signals: Mapping of path to the result returned for that path
        propagate_errors: If True, an incoming error with no canned
            signal is returned so the walk raises it; otherwise the
            walk continues
    """

    def __init__(self,
                 signals: Optional[Mapping[str, VisitResult]] = None,
                 propagate_errors: bool = True):
        self.signals = dict(signals or {})
        self.propagate_errors = propagate_errors
        self.calls: List[Tuple[str, Optional[StorageEntry], Optional[BaseException]]] = []

    def __call__(self, path: str, entry: Optional[StorageEntry],
                 error: Optional[BaseException]) -> VisitResult:
        self.calls.append((path, entry, error))
        if path in self.signals:
            return self.signals[path]
        if error is not None and self.propagate_errors:
            return error
        return None

    @property
    def visited(self) -> List[str]:
        """Paths of every call, in call order."""
        return [path for path, _, _ in self.calls]

    @property
    def errors(self) -> List[Tuple[str, BaseException]]:
        """(path, error) for every call that carried an error."""
        return [(path, error) for path, _, error in self.calls if error is not None]

    def summary(self) -> Dict[str, Any]:
        return {
            'calls': len(self.calls),
            'errors': len(self.errors),
            'dirs': sum(1 for _, entry, _ in self.calls if entry is not None and entry.is_dir()),
        }
