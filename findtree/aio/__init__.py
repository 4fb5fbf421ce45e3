"""Asynchronous implementation of findtree.

This package contains native async/await implementations for non-blocking
traversal. Directory listings and link resolutions are awaited one at a
time; results are streamed strictly in depth-first, left-to-right order.
"""

# Core abstractions
from .core import (
    AsyncFileSystemAdapter,
    AsyncSymlinkResolver,
    AsyncFindTraverser,
)

# High-level API
from .api import (
    TraversalJob,
    FindJob,
    EachJob,
    iter_entries_async,
    collect_entries_async,
    find_files_async,
    find_directories_async,
    iter_files_async,
    iter_directories_async,
)

# Error handling (re-exported from _common)
from .._common.error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    CallbackPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .._common.error_handling import ErrorHandlingAdapter

__all__ = [
    # Core abstractions
    'AsyncFileSystemAdapter',
    'AsyncSymlinkResolver',
    'AsyncFindTraverser',
    # Jobs
    'TraversalJob',
    'FindJob',
    'EachJob',
    # High-level API
    'iter_entries_async',
    'collect_entries_async',
    'find_files_async',
    'find_directories_async',
    'iter_files_async',
    'iter_directories_async',
    # Error handling
    'ErrorPolicy',
    'FailFastPolicy',
    'CallbackPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    'ErrorHandlingAdapter',
]
