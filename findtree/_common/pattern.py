"""Pattern matching for traversal results.

Two match modes are supported and kept deliberately distinct:

- a plain string is compared against the base name of the path only;
- a compiled regular expression is searched in the full path.

Both modes can also be requested explicitly with ``match_name`` and
``match_path``. Any other callable is used as a predicate on the full path.
"""

import os
import re
from typing import Callable, Optional, Pattern, Union

PatternLike = Union[str, Pattern, Callable[[str], bool], None]


def match_name(name: str) -> Callable[[str], bool]:
    """Build a matcher comparing the base name against ``name``."""
    def matcher(path: str) -> bool:
        return os.path.basename(path) == name
    matcher.__name__ = f"match_name({name!r})"
    return matcher


def match_path(regex: Union[str, Pattern]) -> Callable[[str], bool]:
    """Build a matcher searching ``regex`` in the full path."""
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def matcher(path: str) -> bool:
        return compiled.search(path) is not None
    matcher.__name__ = f"match_path({compiled.pattern!r})"
    return matcher


def compile_pattern(pattern: PatternLike) -> Optional[Callable[[str], bool]]:
    """Turn a user supplied pattern into a predicate.

    Args:
        pattern: Base name, compiled regex, predicate, or None/'' for all

    Returns:
        Predicate on the full path, or None when everything matches

    Raises:
        TypeError: If the pattern is of an unsupported type
    """
    if pattern is None or pattern == '':
        return None
    if isinstance(pattern, str):
        return match_name(pattern)
    if isinstance(pattern, re.Pattern):
        return match_path(pattern)
    if callable(pattern):
        return pattern
    raise TypeError(
        f"pattern must be a str, a compiled regex or a callable, "
        f"not {type(pattern).__name__}"
    )


def compare(pattern: PatternLike, path: str) -> bool:
    """Check a single path against a pattern (no pattern matches everything)."""
    matcher = compile_pattern(pattern)
    return matcher is None or bool(matcher(path))
