"""
Error handling policies for findtree.

This module provides a flexible error handling system through the Policy pattern,
allowing callers to decide what happens when a filesystem operation fails during
a traversal. A policy either re-raises (stopping the traversal) or returns,
in which case the traversal continues from where it left off.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union
import sys


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Policies are carried per traversal call; nothing here is process-wide.
    """

    @abstractmethod
    def handle(self, error: Exception, operation: str, path: Optional[str] = None) -> None:
        """
        Handle an error that occurred during a filesystem operation.

        Args:
            error: The exception that was raised
            operation: Name of the operation that failed (e.g., 'list_entries')
            path: The path being processed when the error occurred

        Raises:
            Any exception to stop the traversal. Returning normally means the
            error was absorbed.
        """
        pass

    def __call__(self, error: Exception, operation: str = 'traverse', path: Optional[str] = None) -> None:
        self.handle(error, operation, path)


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping traversal.

    This is the default behavior - an unhandled error is never silent.
    """

    def handle(self, error: Exception, operation: str, path: Optional[str] = None) -> None:
        """Re-raise the error immediately."""
        raise error


class CallbackPolicy(ErrorPolicy):
    """
    Adapts a plain ``fn(error)`` callable into a policy.

    The callable decides by itself whether to raise or to swallow.
    """

    def __init__(self, callback: Callable[[Exception], Any]):
        self.callback = callback

    def handle(self, error: Exception, operation: str, path: Optional[str] = None) -> None:
        self.callback(error)

    def __repr__(self) -> str:
        return f"CallbackPolicy({self.callback!r})"


class _RecordingPolicy(ErrorPolicy):
    """Shared bookkeeping for the policies that absorb errors."""

    def __init__(self):
        self.errors = []
        self.skipped_paths = []

    def _record(self, error: Exception, operation: str, path: Optional[str]) -> None:
        self.errors.append({
            'path': path,
            'operation': operation,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        })
        if path and isinstance(error, OSError):
            self.skipped_paths.append(path)


class ContinueOnErrorsPolicy(_RecordingPolicy):
    """
    Policy that reports errors and continues traversal.

    Errors are collected for later inspection. This is useful when
    you want to process as much as possible despite some failures.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        super().__init__()
        self.verbose = verbose

    def handle(self, error: Exception, operation: str, path: Optional[str] = None) -> None:
        """Record the error and keep going."""
        self._record(error, operation, path)

        if self.verbose:
            if isinstance(error, PermissionError):
                print(f"\nWARNING: Skipping inaccessible path '{path}': {error}", file=sys.stderr)
            else:
                print(f"\nWARNING: Error in {operation} for '{path}': {error}", file=sys.stderr)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'not_exist_errors': sum(1 for e in self.errors if e['error_type'] == 'NotExistError'),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }


class CollectErrorsPolicy(_RecordingPolicy):
    """
    Policy that collects all errors without output, for batch processing.

    Similar to ContinueOnErrorsPolicy but silent.
    """

    def handle(self, error: Exception, operation: str, path: Optional[str] = None) -> None:
        """Silently collect the error."""
        self._record(error, operation, path)


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when some errors are expected but too many indicate
    a systemic problem that should halt processing.
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
        self.errors = []

    def handle(self, error: Exception, operation: str, path: Optional[str] = None) -> None:
        """Absorb the error if under threshold, otherwise raise."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(f"\nWARNING [{self.error_count}/{self.max_errors}]: Error in {operation} for '{path}': {error}",
                  file=sys.stderr)


ErrorHandler = Union[ErrorPolicy, Callable[[Exception], Any], None]


def as_policy(handler: ErrorHandler) -> ErrorPolicy:
    """
    Normalize whatever the caller passed as an error handler.

    Args:
        handler: None (fail fast), an ErrorPolicy, or a ``fn(error)`` callable

    Returns:
        An ErrorPolicy instance
    """
    if handler is None:
        return FailFastPolicy()
    if isinstance(handler, ErrorPolicy):
        return handler
    if callable(handler):
        return CallbackPolicy(handler)
    raise TypeError(f"error handler must be callable, not {type(handler).__name__}")
