"""Configuration system for findtree.

This module defines how callers describe a search: which kind of entry
to collect, an optional name pattern, and how far symbolic links are
followed before giving up.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Union

from .pattern import PatternLike, compile_pattern


# Maximum number of link indirections followed before a link is
# considered unresolved (too deep or cyclic).
DEFAULT_LINK_DEPTH = 5


class TargetType(Enum):
    """Which kind of entry a traversal collects."""
    FILE = "file"
    DIRECTORY = "dir"

    @classmethod
    def parse(cls, value: Union['TargetType', str]) -> 'TargetType':
        """Accept either an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown target type: {value!r}") from None


@dataclass
class FindConfig:
    """Complete configuration for one search.

    Built by the high-level API from its keyword arguments; the traversal
    engines only consume ``target`` and ``max_link_depth``, the collectors
    use ``matches`` to filter what the engine emits.
    """

    target: TargetType = TargetType.FILE
    pattern: PatternLike = None
    max_link_depth: int = DEFAULT_LINK_DEPTH

    _matcher: Optional[Callable[[str], bool]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self.target = TargetType.parse(self.target)
        self._matcher = compile_pattern(self.pattern)

    @property
    def has_pattern(self) -> bool:
        """True if results are filtered at all."""
        return self._matcher is not None

    def matches(self, path: str) -> bool:
        """Check if an emitted path passes the pattern.

        Args:
            path: Path produced by the traversal engine

        Returns:
            True if there is no pattern or the pattern matches
        """
        if self._matcher is None:
            return True
        return bool(self._matcher(path))

    def filter(self, paths: List[str]) -> List[str]:
        """Filter a buffered result list, preserving order."""
        if self._matcher is None:
            return paths
        return [path for path in paths if self.matches(path)]

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.max_link_depth, int) or isinstance(self.max_link_depth, bool):
            errors.append("max_link_depth must be an integer")
        elif self.max_link_depth < 0:
            errors.append("max_link_depth cannot be negative")

        return errors
