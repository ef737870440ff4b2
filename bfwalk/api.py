"""High-level API for bfwalk.

This module provides simple, functional interfaces for common walks.
They wrap the visitor-based walkers for the cases where a list or a count
is all the caller wants.
"""

import os
from typing import Callable, List, Optional, Union
from .config import WalkConfig, WalkStrategy, create_walker, parse_strategy
from .core.entry import StorageEntry
from .core.signals import Signal, VisitResult, Visitor
from .core.storage import StorageProvider

Predicate = Callable[[str, StorageEntry], bool]


def walk(
    storage: StorageProvider,
    root: str,
    visit: Visitor,
    strategy: Union[WalkStrategy, str] = WalkStrategy.BREADTH_FIRST,
) -> None:
    """Walk a storage tree with the chosen strategy.

    Args:
        storage: Provider for the tree
        root: Path to start from
        visit: Visitor callback, ``visit(path, entry, error)``
        strategy: Walk order (bfs or dfs)

    Example:
        >>> def show(path, entry, error):
        ...     if error is not None:
        ...         return error
        ...     print(path)
        >>> walk(OSStorage(), "src", show)
    """
    create_walker(strategy)(storage, root, visit)


def collect_paths(
    storage: StorageProvider,
    root: str,
    strategy: Union[WalkStrategy, str] = WalkStrategy.BREADTH_FIRST,
    max_depth: Optional[int] = None,
) -> List[str]:
    """Return every visited path in walk order.

    Storage errors are raised. Directories at ``max_depth`` are visited
    but not descended into.

    Example:
        >>> collect_paths(storage, "root", max_depth=1)
        ['root', 'root/dirA', 'root/file1.txt']
    """
    config = _build_config(strategy, max_depth)
    paths: List[str] = []

    def visit(path: str, entry: Optional[StorageEntry], error: Optional[BaseException]) -> VisitResult:
        if error is not None:
            return error
        paths.append(path)
        return _depth_limit(config, root, path, entry)

    create_walker(config.strategy)(storage, root, visit)
    return paths


def count_entries(
    storage: StorageProvider,
    root: str,
    strategy: Union[WalkStrategy, str] = WalkStrategy.BREADTH_FIRST,
    max_depth: Optional[int] = None,
) -> int:
    """Count visited entries, the root included."""
    return len(collect_paths(storage, root, strategy, max_depth))


def find_paths(
    storage: StorageProvider,
    root: str,
    predicate: Predicate,
    strategy: Union[WalkStrategy, str] = WalkStrategy.BREADTH_FIRST,
) -> List[str]:
    """Find paths whose ``(path, entry)`` match a predicate.

    Example:
        >>> find_paths(storage, "root", lambda path, entry: path.endswith(".txt"))
    """
    matches: List[str] = []

    def visit(path: str, entry: Optional[StorageEntry], error: Optional[BaseException]) -> VisitResult:
        if error is not None:
            return error
        if predicate(path, entry):
            matches.append(path)
        return None

    create_walker(strategy)(storage, root, visit)
    return matches


def first_match(
    storage: StorageProvider,
    root: str,
    predicate: Predicate,
) -> Optional[str]:
    """Return the shallowest path matching a predicate, or None.

    Walks breadth-first and stops as soon as a match is seen, so the
    result is the match closest to the root (lexically first among
    matches at that depth).
    """
    found: List[str] = []

    def visit(path: str, entry: Optional[StorageEntry], error: Optional[BaseException]) -> VisitResult:
        if error is not None:
            return error
        if predicate(path, entry):
            found.append(path)
            return Signal.SKIP_ALL
        return None

    create_walker(WalkStrategy.BREADTH_FIRST)(storage, root, visit)
    return found[0] if found else None


# Helper functions

def depth_of(root: str, path: str) -> int:
    """Number of path components between root and path (root = 0)."""
    if path == root:
        return 0
    rel = os.path.relpath(path, root or os.curdir)
    if rel == os.curdir:
        return 0
    rel = rel.replace(os.sep, "/")
    return len([part for part in rel.split("/") if part and part != "."])


def _depth_limit(config: WalkConfig, root: str, path: str, entry: StorageEntry) -> VisitResult:
    if config.max_depth is None or not entry.is_dir():
        return None
    if depth_of(root, path) >= config.max_depth:
        return Signal.SKIP_DIR
    return None


def _build_config(strategy: Union[WalkStrategy, str], max_depth: Optional[int]) -> WalkConfig:
    config = WalkConfig(strategy=parse_strategy(strategy), max_depth=max_depth)
    errors = config.validate()
    if errors:
        raise ValueError("; ".join(errors))
    return config
