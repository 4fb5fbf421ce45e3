"""findtree - Recursive file and directory finder.

Walks a directory tree, resolves symbolic links with a bounded depth,
and collects or streams the files or directories it finds, optionally
filtered by name.

Choose your style:
━━━━━━━━━━━━━━━━━━
Blocking:
    findtree.file_sync(root, pattern=None)        -> list of files
    findtree.dir_sync(root, pattern=None)         -> list of directories

Scheduled (inside a running asyncio loop):
    findtree.file(root, callback, pattern=None)   -> FindJob
    findtree.dir(root, callback, pattern=None)    -> FindJob
    findtree.eachfile(root, action, pattern=None) -> EachJob (.end/.error)
    findtree.eachdir(root, action, pattern=None)  -> EachJob (.end/.error)

Probes (is_* look at the entry itself, links are not followed):
    findtree.exists(path), findtree.is_file(path),
    findtree.is_directory(path), findtree.is_symlink(path)

Another filesystem or default error handler:
    finder = findtree.create_finder(adapter, error_handler)
━━━━━━━━━━━━━━━━━━

Patterns: a str matches the base name exactly; a compiled regex is
searched in the full path.
"""

__version__ = "0.3.0"

from . import sync
from . import aio
from ._common.config import DEFAULT_LINK_DEPTH, FindConfig, TargetType
from ._common.errors import FindError, NotExistError
from ._common.pattern import match_name, match_path
from ._common.error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .finder import Finder, create_finder

_default_finder = Finder()

file = _default_finder.file
dir = _default_finder.dir
eachfile = _default_finder.eachfile
eachdir = _default_finder.eachdir
file_sync = _default_finder.file_sync
dir_sync = _default_finder.dir_sync
exists = _default_finder.exists
is_file = _default_finder.is_file
is_directory = _default_finder.is_directory
is_symlink = _default_finder.is_symlink

__all__ = [
    "__version__",
    "sync",
    "aio",
    # Default instance
    "file",
    "dir",
    "eachfile",
    "eachdir",
    "file_sync",
    "dir_sync",
    "exists",
    "is_file",
    "is_directory",
    "is_symlink",
    # Factory
    "Finder",
    "create_finder",
    # Configuration and patterns
    "DEFAULT_LINK_DEPTH",
    "FindConfig",
    "TargetType",
    "match_name",
    "match_path",
    # Errors
    "FindError",
    "NotExistError",
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    "ThresholdPolicy",
]
