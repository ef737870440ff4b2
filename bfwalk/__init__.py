"""bfwalk - Breadth-first directory walking.

bfwalk walks any hierarchical storage (real filesystem, in-memory trees,
or anything behind a StorageProvider) breadth-first: every entry at depth
N is visited before any entry at depth N+1, siblings in lexical order.

The visitor contract matches a depth-first walk, so the two are drop-in
replacements for each other:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bfwalk import walk_dir, walk_dir_depth_first, OSStorage, SKIP_DIR

    def visit(path, entry, error):
        if error is not None:
            return error
        if entry.is_dir() and entry.name() == ".git":
            return SKIP_DIR
        print(path)

    walk_dir(OSStorage(), "project", visit)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    StorageEntry,
    SimpleEntry,
    StorageProvider,
    Signal,
    SKIP_DIR,
    SKIP_ALL,
    Visitor,
    classify_result,
    walk_dir,
    walk_dir_depth_first,
)
from .storage import OSStorage, OSEntry
from .config import WalkStrategy, WalkConfig, parse_strategy, create_walker
from .api import (
    walk,
    collect_paths,
    count_entries,
    find_paths,
    first_match,
)
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
    ErrorHandlingVisitor,
    with_error_policy,
)

__all__ = [
    "__version__",
    # Core
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
    # Storage
    "OSStorage",
    "OSEntry",
    # Config
    "WalkStrategy",
    "WalkConfig",
    "parse_strategy",
    "create_walker",
    # API
    "walk",
    "collect_paths",
    "count_entries",
    "find_paths",
    "first_match",
    # Error handling
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    "ThresholdPolicy",
    "ErrorHandlingVisitor",
    "with_error_policy",
]
