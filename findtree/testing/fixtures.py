"""Test fixtures for findtree consumers.

InMemoryFileSystemAdapter is a FileSystemAdapter backed by a dict. It
understands files, directories and symbolic links (including dangling
and cyclic ones), keeps listings in insertion order, counts calls, and
can be told to fail a given operation on a given path, which is hard to
arrange reliably on a real filesystem.

Example:
    fs = InMemoryFileSystemAdapter()
    fs.add_file('/t/a.txt')
    fs.add_symlink('/t/loop', '/t/loop')
    fs.fail('list_entries', '/t/locked', PermissionError(13, 'denied'))
    finder = create_finder(fs)
"""

import errno
import os
import posixpath
import stat
from collections import Counter
from typing import Dict, List, Optional

from ..sync.core.adapter import FileSystemAdapter

# Same bound as Linux' MAXSYMLINKS
MAX_LINK_HOPS = 40


class _Entry:
    __slots__ = ('kind', 'target')

    def __init__(self, kind: str, target: Optional[str] = None):
        self.kind = kind
        self.target = target


_MODES = {
    'dir': stat.S_IFDIR | 0o755,
    'file': stat.S_IFREG | 0o644,
    'link': stat.S_IFLNK | 0o777,
}


class InMemoryFileSystemAdapter(FileSystemAdapter):
    """Dict backed POSIX-style filesystem for tests and sandboxes."""

    def __init__(self):
        self._entries: Dict[str, _Entry] = {'/': _Entry('dir')}
        self._failures: Dict[tuple, OSError] = {}
        self.calls = Counter()

    # Building the tree

    def add_dir(self, path: str) -> str:
        """Create a directory (and any missing parents)."""
        path = self.absolute(path)
        if path != '/':
            self.add_dir(posixpath.dirname(path))
        self._entries.setdefault(path, _Entry('dir'))
        return path

    def add_file(self, path: str) -> str:
        """Create an empty file (and any missing parent directories)."""
        path = self.absolute(path)
        self.add_dir(posixpath.dirname(path))
        self._entries[path] = _Entry('file')
        return path

    def add_symlink(self, path: str, target: str) -> str:
        """Create a symbolic link; ``target`` may be relative and need not exist."""
        path = self.absolute(path)
        self.add_dir(posixpath.dirname(path))
        self._entries[path] = _Entry('link', target)
        return path

    def remove(self, path: str) -> None:
        """Remove an entry and everything below it."""
        path = self.absolute(path)
        prefix = path.rstrip('/') + '/'
        for key in [k for k in self._entries if k == path or k.startswith(prefix)]:
            del self._entries[key]

    def fail(self, operation: str, path: str, error: OSError) -> None:
        """Make ``operation`` ('lstat', 'list_entries', 'resolve_link') raise on ``path``."""
        self._failures[(operation, self.absolute(path))] = error

    # FileSystemAdapter primitives

    def absolute(self, path: str) -> str:
        return posixpath.normpath(posixpath.join('/', os.fspath(path)))

    def exists(self, path: str) -> bool:
        self.calls['exists'] += 1
        try:
            self._walk(path, follow_last=True)
        except OSError:
            return False
        return True

    def lstat(self, path: str) -> os.stat_result:
        self.calls['lstat'] += 1
        self._check('lstat', path)
        entry = self._entries[self._walk(path, follow_last=False)]
        return os.stat_result((_MODES[entry.kind], 0, 0, 1, 0, 0, 0, 0, 0, 0))

    def list_entries(self, path: str) -> List[str]:
        self.calls['list_entries'] += 1
        self._check('list_entries', path)
        concrete = self._walk(path, follow_last=True)
        if self._entries[concrete].kind != 'dir':
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        return [
            posixpath.basename(key) for key in self._entries
            if key != concrete and posixpath.dirname(key) == concrete
        ]

    def resolve_link(self, path: str) -> str:
        self.calls['resolve_link'] += 1
        self._check('resolve_link', path)
        return self._walk(path, follow_last=True)

    # Internals

    def _check(self, operation: str, path: str) -> None:
        error = self._failures.get((operation, self.absolute(path)))
        if error is not None:
            raise error

    def _walk(self, path: str, follow_last: bool, hops: int = 0) -> str:
        """Return the concrete path of ``path``, following links like realpath.

        Raises:
            FileNotFoundError: A component is missing
            NotADirectoryError: A non-final component is not a directory
            OSError: ELOOP after too many link hops
        """
        parts = [p for p in self.absolute(path).split('/') if p]
        current = '/'
        for index, part in enumerate(parts):
            candidate = posixpath.join(current, part)
            entry = self._entries.get(candidate)
            if entry is None:
                raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)

            is_last = index == len(parts) - 1
            if entry.kind == 'link' and (follow_last or not is_last):
                if hops >= MAX_LINK_HOPS:
                    raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), path)
                target = posixpath.join(current, entry.target)
                current = self._walk(target, True, hops + 1)
            elif not is_last and entry.kind != 'dir':
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
            else:
                current = candidate
        return current

    def __repr__(self) -> str:
        return f"InMemoryFileSystemAdapter({len(self._entries)} entries)"
