"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration classes (FindConfig, TargetType)
- Pattern matching
- Exceptions, error policies and the error routing adapter

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import (
    DEFAULT_LINK_DEPTH,
    FindConfig,
    TargetType,
)
from .errors import (
    FindError,
    NotExistError,
    is_broken_link,
)
from .pattern import (
    compare,
    compile_pattern,
    match_name,
    match_path,
)
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    CallbackPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
    as_policy,
)
from .error_handling import ErrorHandlingAdapter

__all__ = [
    'DEFAULT_LINK_DEPTH',
    'FindConfig',
    'TargetType',
    'FindError',
    'NotExistError',
    'is_broken_link',
    'compare',
    'compile_pattern',
    'match_name',
    'match_path',
    'ErrorPolicy',
    'FailFastPolicy',
    'CallbackPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    'as_policy',
    'ErrorHandlingAdapter',
]
