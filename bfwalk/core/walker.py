"""Walk strategies for bfwalk.

Both walkers share one callback contract, so the breadth-first walker is
a drop-in replacement for the depth-first one:

    visit(path, entry, error) -> None | Signal | Exception

``entry`` is None only when the root itself could not be resolved.
"""

import logging
from collections import deque
from typing import Deque, List, Tuple
from .entry import StorageEntry
from .signals import Outcome, Signal, Visitor, classify_result, is_skip
from .storage import StorageProvider

logger = logging.getLogger(__name__)

# (path, entry) of a directory that was accepted but not yet listed
PendingDirectory = Tuple[str, StorageEntry]


def walk_dir(storage: StorageProvider, root: str, visit: Visitor) -> None:
    """Walk the tree rooted at root breadth-first, calling visit for each entry.

    Every entry at depth N is visited before any entry at depth N+1, and
    siblings are visited in lexical order. That makes the output
    deterministic but means each directory is read fully into memory
    before any of its children is visited.

    Symbolic links found while listing are not followed, but if root
    itself is a link its target is walked.

    Args:
        storage: Provider to list and resolve paths with
        root: Path to start from
        visit: Visitor callback

    Raises:
        Exception: Whatever error the visitor returned or raised
    """
    logger.debug("Breadth-first walk from %r", root)
    try:
        entry = storage.resolve(root)
    except OSError as exc:
        logger.debug("Cannot resolve root %r: %s", root, exc)
        outcome = classify_result(visit(root, None, exc))
    else:
        outcome = classify_result(visit(root, entry, None))
        if outcome is Signal.CONTINUE and entry.is_dir():
            outcome = _expand_breadth_first(storage, deque([(root, entry)]), visit)
    _finish(outcome)


def _expand_breadth_first(storage: StorageProvider,
                          queue: Deque[PendingDirectory],
                          visit: Visitor) -> Outcome:
    """Drain the queue of pending directories in FIFO order.

    Returns:
        Signal.CONTINUE when the queue empties, otherwise the outcome
        that ended the walk
    """
    while queue:
        path, entry = queue.popleft()

        try:
            children = storage.read_dir(path)
        except OSError as exc:
            logger.debug("Cannot list %r: %s", path, exc)
            # Second call for the same path, to report the listing error
            outcome = classify_result(visit(path, entry, exc))
            if outcome is Signal.CONTINUE:
                continue
            if outcome is Signal.SKIP_DIR and entry.is_dir():
                continue
            return outcome

        logger.debug("Expanding %r (%d children, %d queued)",
                     path, len(children), len(queue))

        # Children go to a subqueue first so a file-level skip can drop
        # the directories already found in this listing.
        subqueue: List[PendingDirectory] = []
        for child in children:
            child_path = storage.join(path, child.name())
            outcome = classify_result(visit(child_path, child, None))
            if outcome is Signal.CONTINUE:
                if child.is_dir():
                    subqueue.append((child_path, child))
            elif outcome is Signal.SKIP_DIR:
                if child.is_dir():
                    continue
                logger.debug("Skipping rest of %r at %r", path, child_path)
                subqueue = []
                break
            else:
                return outcome

        queue.extend(subqueue)

    return Signal.CONTINUE


def walk_dir_depth_first(storage: StorageProvider, root: str, visit: Visitor) -> None:
    """Walk the tree rooted at root depth-first, in pre-order.

    Same contract as ``walk_dir``: lexical sibling order, the same
    signals, listing errors reported through a second visit call, and
    only the root resolved through symbolic links.

    Args:
        storage: Provider to list and resolve paths with
        root: Path to start from
        visit: Visitor callback

    Raises:
        Exception: Whatever error the visitor returned or raised
    """
    logger.debug("Depth-first walk from %r", root)
    try:
        entry = storage.resolve(root)
    except OSError as exc:
        logger.debug("Cannot resolve root %r: %s", root, exc)
        outcome = classify_result(visit(root, None, exc))
    else:
        outcome = _walk_depth_first(storage, root, entry, visit)
    _finish(outcome)


def _walk_depth_first(storage: StorageProvider,
                      path: str,
                      entry: StorageEntry,
                      visit: Visitor) -> Outcome:
    """Visit one entry and recurse into its children."""
    outcome = classify_result(visit(path, entry, None))
    if outcome is not Signal.CONTINUE or not entry.is_dir():
        if outcome is Signal.SKIP_DIR and entry.is_dir():
            return Signal.CONTINUE
        return outcome

    try:
        children = storage.read_dir(path)
    except OSError as exc:
        logger.debug("Cannot list %r: %s", path, exc)
        outcome = classify_result(visit(path, entry, exc))
        if outcome is Signal.SKIP_DIR:
            return Signal.CONTINUE
        if outcome is not Signal.CONTINUE:
            return outcome
        children = []

    for child in children:
        outcome = _walk_depth_first(storage, storage.join(path, child.name()), child, visit)
        if outcome is Signal.SKIP_DIR:
            # A file asked to skip the rest of this directory
            break
        if outcome is not Signal.CONTINUE:
            return outcome
    return Signal.CONTINUE


def _finish(outcome: Outcome) -> None:
    """Turn the final outcome of a walk into a return or a raise."""
    if is_skip(outcome):
        logger.debug("Walk stopped by %s", outcome.name)
        return
    if isinstance(outcome, BaseException):
        raise outcome
