"""
Error handling policies for bfwalk.

The walkers never decide what a storage error means; they hand it to the
visitor. This module provides the Policy pattern on that seam: wrap a
visitor with ``with_error_policy`` and incoming errors are routed to a
policy, while clean calls reach the visitor as before.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from .core.entry import StorageEntry
from .core.signals import Signal, VisitResult, Visitor


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for classifying errors
    reported to a visitor: resolution errors (``entry`` is None) and
    listing errors (``entry`` is the directory that failed).
    """

    @abstractmethod
    def handle(self, path: str, entry: Optional[StorageEntry], error: BaseException) -> VisitResult:
        """
        Handle an error reported during a walk.

        Args:
            path: Path the error belongs to
            entry: Entry for the path, None if the root could not be resolved
            error: The exception raised by the storage provider

        Returns:
            A visitor result: a Signal to recover, or the error to stop the walk
        """
        pass


def _recovery_signal(entry: Optional[StorageEntry]) -> Signal:
    """Signal that steps over a failed path without stopping the walk."""
    if entry is not None and entry.is_dir():
        return Signal.SKIP_DIR
    return Signal.CONTINUE


class FailFastPolicy(ErrorPolicy):
    """
    Policy that stops the walk on the first error.

    This is the default behavior - the error is raised from the walk
    function unchanged. Useful when partial results are not acceptable.
    """

    def handle(self, path: str, entry: Optional[StorageEntry], error: BaseException) -> VisitResult:
        """Return the error so the walk raises it."""
        return error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that reports errors and continues the walk.

    Errors are collected for later inspection and the failing directory
    is skipped. This is useful when you want to process as much as
    possible despite some unreadable directories.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []
        self.verbose = verbose

    def handle(self, path: str, entry: Optional[StorageEntry], error: BaseException) -> VisitResult:
        """Record the error and skip the failing path."""
        self.errors.append(_error_record(path, entry, error))

        if isinstance(error, OSError):
            self.skipped_paths.append(path)

        if self.verbose:
            if isinstance(error, PermissionError):
                print(f"\nWARNING: Skipping inaccessible path '{path}': {error}", file=sys.stderr)
            else:
                print(f"\nWARNING: Error walking '{path}': {error}", file=sys.stderr)

        return _recovery_signal(entry)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'not_found_errors': sum(1 for e in self.errors if e['error_type'] == 'FileNotFoundError'),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors
        }


class CollectErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Policy that collects all errors without output, for batch processing.

    Useful for collecting all errors and presenting them at the end.
    """

    def __init__(self):
        super().__init__(verbose=False)


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails.

    Useful when some errors are expected but too many indicate
    a systemic problem that should halt the walk.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[BaseException] = []

    def handle(self, path: str, entry: Optional[StorageEntry], error: BaseException) -> VisitResult:
        """Skip the failing path if under threshold, otherwise stop the walk."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(f"\nWARNING [{self.error_count}/{self.max_errors}]: Error walking '{path}': {error}",
                  file=sys.stderr)

        return _recovery_signal(entry)


class ErrorHandlingVisitor:
    """
    Visitor wrapper that routes incoming errors to a policy.

    Calls without an error go straight to the wrapped visitor. Calls
    carrying an error go to the policy instead, so the wrapped visitor
    can be written as if storage never failed.
    """

    def __init__(self, visitor: Visitor, policy: Optional[ErrorPolicy] = None):
        """
        Args:
            visitor: The visitor to wrap
            policy: Error handling policy (defaults to FailFastPolicy)
        """
        self._visitor = visitor
        self._policy = policy or FailFastPolicy()

    def __call__(self, path: str, entry: Optional[StorageEntry],
                 error: Optional[BaseException]) -> VisitResult:
        if error is not None:
            return self._policy.handle(path, entry, error)
        return self._visitor(path, entry, None)

    def get_policy(self) -> ErrorPolicy:
        return self._policy

    def set_policy(self, policy: ErrorPolicy) -> None:
        self._policy = policy

    def get_visitor(self) -> Visitor:
        return self._visitor

    def __repr__(self) -> str:
        return f"ErrorHandlingVisitor({self._visitor!r}, policy={self._policy.__class__.__name__})"


def with_error_policy(visitor: Visitor, policy: Optional[ErrorPolicy] = None) -> ErrorHandlingVisitor:
    """
    Convenience function to wrap a visitor with an error policy.

    Example:
        >>> policy = CollectErrorsPolicy()
        >>> walk_dir(storage, "data", with_error_policy(visit, policy))
        >>> policy.get_statistics()['total_errors']
    """
    return ErrorHandlingVisitor(visitor, policy)


def _error_record(path: str, entry: Optional[StorageEntry], error: BaseException) -> Dict[str, Any]:
    return {
        'path': path,
        'is_dir': entry.is_dir() if entry is not None else None,
        'error': error,
        'error_type': type(error).__name__,
        'error_message': str(error)
    }
