#!/usr/bin/env python3
"""
Breadth-first listing of a directory.

This example demonstrates:
- Walking the real filesystem level by level
- Pruning directories with SKIP_DIR
- Stepping over unreadable directories with an error policy
"""

import argparse
import os
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bfwalk import OSStorage, SKIP_DIR, ContinueOnErrorsPolicy, walk, with_error_policy

PRUNED = {".git", "__pycache__", "node_modules"}


def main() -> int:
    parser = argparse.ArgumentParser(description="List a directory tree breadth-first")
    parser.add_argument("root", nargs="?", default=".", help="Directory to walk")
    parser.add_argument("--dfs", action="store_true", help="Walk depth-first instead")
    args = parser.parse_args()

    def show(path, entry, error):
        if entry.is_dir() and entry.name() in PRUNED:
            return SKIP_DIR
        rel = os.path.relpath(path, args.root)
        depth = 0 if rel == "." else rel.count(os.sep) + 1
        suffix = "/" if entry.is_dir() else ""
        print(f"{'  ' * depth}{entry.name()}{suffix}")
        return None

    policy = ContinueOnErrorsPolicy(verbose=True)
    walk(OSStorage(), args.root, with_error_policy(show, policy),
         strategy="dfs" if args.dfs else "bfs")

    stats = policy.get_statistics()
    if stats['total_errors']:
        print(f"\n{stats['total_errors']} path(s) skipped", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
