"""FileSystemAdapter abstraction for findtree.

The adapter is the only place the traversal engine touches the
filesystem. Swapping it (see ``findtree.create_finder``) lets the same
engine run against an in-memory tree, a sandbox, or anything else that
can answer these few questions.
"""

import os
import stat
from abc import ABC, abstractmethod
from typing import List


class FileSystemAdapter(ABC):
    """Abstract adapter for the filesystem primitives the engine consumes.

    Subclasses implement the raw operations; the entry classification
    predicates are derived here from ``lstat`` so that a symbolic link
    is always reported as a link, never as what it points to.

    Every method except ``exists`` may raise ``OSError``.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether ``path`` exists, following symbolic links.

        A dangling or cyclic link does not exist. Never raises.
        """
        pass

    @abstractmethod
    def lstat(self, path: str):
        """Stat ``path`` without following a final symbolic link.

        Returns:
            An object with at least an ``st_mode`` attribute
        """
        pass

    @abstractmethod
    def list_entries(self, path: str) -> List[str]:
        """List the base names of the entries of a directory."""
        pass

    @abstractmethod
    def resolve_link(self, path: str) -> str:
        """Resolve a symbolic link to the concrete path it designates.

        Raises:
            OSError: with errno ENOENT or ELOOP when the link is broken
                (missing target or a resolution cycle)
        """
        pass

    def absolute(self, path: str) -> str:
        """Return the absolute, normalized form of ``path``."""
        return os.path.abspath(path)

    # Entry classification

    def is_file(self, path: str) -> bool:
        return stat.S_ISREG(self.lstat(path).st_mode)

    def is_directory(self, path: str) -> bool:
        return stat.S_ISDIR(self.lstat(path).st_mode)

    def is_symlink(self, path: str) -> bool:
        return stat.S_ISLNK(self.lstat(path).st_mode)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
