"""Exception types shared by the sync and aio implementations."""

import errno


# errno values that mark a symbolic link as broken rather than failed
BROKEN_LINK_ERRNOS = frozenset({errno.ENOENT, errno.ELOOP})


class FindError(Exception):
    """Base class for errors raised by findtree."""


class NotExistError(FindError, FileNotFoundError):
    """Raised when a traversal root (or a directory being descended) is missing."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path} does not exist.")


def is_broken_link(error: BaseException) -> bool:
    """Check whether an error means the link target is missing or loops.

    Args:
        error: Exception raised while resolving a symbolic link

    Returns:
        True if the error is the broken-link condition
    """
    return isinstance(error, OSError) and error.errno in BROKEN_LINK_ERRNOS
