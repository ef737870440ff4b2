"""Visitor signals for bfwalk.

A visitor tells the walker how to proceed after each call. It can return:

- ``None`` or ``Signal.CONTINUE`` - keep going
- ``Signal.SKIP_DIR`` - skip this directory, or the remaining siblings
  when returned for a non-directory
- ``Signal.SKIP_ALL`` - stop the whole walk successfully
- an exception instance - stop the walk and raise it

Raising from the visitor works too; the exception propagates unchanged.
"""

from enum import Enum
from typing import Callable, Optional, Union
from .entry import StorageEntry


class Signal(Enum):
    """Control signals a visitor can return.

    SKIP_DIR and SKIP_ALL are not errors. A walk that ends because of
    either one returns normally.
    """
    CONTINUE = "continue"
    SKIP_DIR = "skip_dir"
    SKIP_ALL = "skip_all"


SKIP_DIR = Signal.SKIP_DIR
SKIP_ALL = Signal.SKIP_ALL

VisitResult = Union[None, Signal, BaseException]
Outcome = Union[Signal, BaseException]
Visitor = Callable[[str, Optional[StorageEntry], Optional[BaseException]], VisitResult]


def classify_result(result: VisitResult) -> Outcome:
    """Normalize a visitor return value.

    Args:
        result: Whatever the visitor returned

    Returns:
        A Signal, or the exception instance to propagate

    Raises:
        TypeError: If the visitor returned anything else
    """
    if result is None:
        return Signal.CONTINUE
    if isinstance(result, (Signal, BaseException)):
        return result
    raise TypeError(
        f"Visitor must return None, a Signal or an exception, "
        f"got {type(result).__name__}: {result!r}"
    )


def is_skip(outcome: Outcome) -> bool:
    """Check if an outcome is one of the skip signals."""
    return outcome is Signal.SKIP_DIR or outcome is Signal.SKIP_ALL
