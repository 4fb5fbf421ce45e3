"""
Error handling adapter for findtree.

This module provides the ErrorHandlingAdapter that wraps a filesystem
adapter (sync or async) and delegates I/O failures to an error policy.
"""

import asyncio
import functools
from typing import Any

from .errors import is_broken_link
from .error_policies import ErrorPolicy, FailFastPolicy


# Value substituted for a failed call once the policy has absorbed the error.
# None means "unknown": callers must not treat it as a negative answer.
_DEFAULTS = {
    'list_entries': [],
}


class ErrorHandlingAdapter:
    """
    Adapter that wraps a filesystem adapter and routes errors through a policy.

    This adapter uses the dynamic proxy pattern to automatically wrap
    all methods of the underlying adapter. Only ``OSError`` is routed;
    anything else is a programming error and propagates unchanged.

    ``resolve_link`` is special: the broken-link condition (missing target
    or a resolution loop) is not a failure and is passed through so the
    symlink resolver can absorb it.
    """

    def __init__(self, base_adapter: Any, policy: ErrorPolicy = None):
        """
        Initialize the error handling adapter.

        Args:
            base_adapter: The adapter to wrap (e.g., LocalFileSystemAdapter)
            policy: Error handling policy (defaults to FailFastPolicy)
        """
        self._base_adapter = base_adapter
        self._policy = policy or FailFastPolicy()

    def __getattr__(self, name: str) -> Any:
        """
        Dynamic proxy that wraps all methods with error handling.

        Args:
            name: The attribute name being accessed

        Returns:
            The attribute from the base adapter, wrapped if it's a method
        """
        attr = getattr(self._base_adapter, name)

        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def wrapper(*args, **kwargs):
            try:
                result = attr(*args, **kwargs)
            except OSError as e:
                return self._handle(e, name, args)

            if asyncio.iscoroutine(result):
                return self._handle_coroutine(result, name, args)

            return result

        return wrapper

    def _handle(self, error: OSError, method_name: str, args: tuple) -> Any:
        """Hand the error to the policy and return the method's default."""
        if method_name == 'resolve_link' and is_broken_link(error):
            raise error

        path = args[0] if args else None
        self._policy.handle(error, method_name, path)
        default = _DEFAULTS.get(method_name)
        return list(default) if isinstance(default, list) else default

    async def _handle_coroutine(self, coro, method_name: str, args: tuple) -> Any:
        """
        Handle errors in async methods.

        Args:
            coro: The coroutine to execute
            method_name: Name of the method being called
            args: Original method arguments

        Returns:
            The result from the coroutine, or the default after the policy ran
        """
        try:
            return await coro
        except OSError as e:
            return self._handle(e, method_name, args)

    def get_policy(self) -> ErrorPolicy:
        """Get the current error policy."""
        return self._policy

    def set_policy(self, policy: ErrorPolicy) -> None:
        """
        Change the error policy.

        Args:
            policy: The new ErrorPolicy to use
        """
        self._policy = policy

    def get_base_adapter(self) -> Any:
        """Get the wrapped base adapter."""
        return self._base_adapter

    def __repr__(self) -> str:
        return f"ErrorHandlingAdapter({self._base_adapter!r}, policy={self._policy.__class__.__name__})"
