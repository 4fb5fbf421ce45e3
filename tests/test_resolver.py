"""Tests for bounded symbolic link resolution (sync and async)."""

import errno
import posixpath

import pytest

from findtree import DEFAULT_LINK_DEPTH
from findtree._common import CollectErrorsPolicy, ErrorHandlingAdapter
from findtree.aio import AsyncFileSystemAdapter, AsyncSymlinkResolver
from findtree.sync import SymlinkResolver
from findtree.testing import InMemoryFileSystemAdapter


class OneHopFileSystem(InMemoryFileSystemAdapter):
    """Resolves a single indirection per call, like readlink."""

    def resolve_link(self, path):
        self.calls['resolve_link'] += 1
        self._check('resolve_link', path)
        entry = self._entries[self.absolute(path)]
        return posixpath.join(posixpath.dirname(self.absolute(path)), entry.target)


def make_chain(fs, length, final='/t/file'):
    """Create /t/l1 -> /t/l2 -> ... -> /t/l<length> -> final."""
    fs.add_file('/t/file')
    for i in range(1, length + 1):
        target = final if i == length else f'/t/l{i + 1}'
        fs.add_symlink(f'/t/l{i}', target)
    return '/t/l1'


class TestSymlinkResolver:
    """Sync resolver."""

    def test_default_depth(self):
        assert DEFAULT_LINK_DEPTH == 5
        assert SymlinkResolver(InMemoryFileSystemAdapter()).max_depth == 5

    def test_plain_path_resolves_to_absolute(self):
        fs = InMemoryFileSystemAdapter()
        fs.add_file('/t/file')
        assert SymlinkResolver(fs).resolve('t/file') == '/t/file'

    def test_full_resolution_adapter(self):
        fs = InMemoryFileSystemAdapter()
        make_chain(fs, 8)
        assert SymlinkResolver(fs).resolve('/t/l1') == '/t/file'
        assert fs.calls['resolve_link'] == 1

    def test_chain_within_depth(self):
        fs = OneHopFileSystem()
        start = make_chain(fs, 5)
        assert SymlinkResolver(fs).resolve(start) == '/t/file'
        assert fs.calls['resolve_link'] == 5

    def test_chain_beyond_depth_is_unresolved(self):
        fs = OneHopFileSystem()
        start = make_chain(fs, 6)
        assert SymlinkResolver(fs).resolve(start) is None
        assert fs.calls['resolve_link'] == 5

    def test_one_hop_cycle_terminates(self):
        """b does not exist (it loops), so the chain stops at b."""
        fs = OneHopFileSystem()
        fs.add_symlink('/t/a', '/t/b')
        fs.add_symlink('/t/b', '/t/a')
        assert SymlinkResolver(fs).resolve('/t/a') == '/t/b'
        assert fs.calls['resolve_link'] == 1

    def test_custom_depth(self):
        fs = OneHopFileSystem()
        start = make_chain(fs, 3)
        assert SymlinkResolver(fs, max_depth=2).resolve(start) is None
        assert SymlinkResolver(fs, max_depth=3).resolve(start) == '/t/file'

    def test_broken_link_returns_original_path(self):
        fs = InMemoryFileSystemAdapter()
        fs.add_symlink('/t/dangling', '/t/missing')
        assert SymlinkResolver(fs).resolve('/t/dangling') == '/t/dangling'

    def test_self_loop_returns_original_path(self):
        fs = InMemoryFileSystemAdapter()
        fs.add_symlink('/t/loop', 'loop')
        assert SymlinkResolver(fs).resolve('/t/loop') == '/t/loop'

    def test_vanished_target_inside_chain(self):
        """Once inside a chain, a missing path is returned as is (absolute)."""
        fs = OneHopFileSystem()
        fs.add_symlink('/t/link', '/t/gone')
        assert SymlinkResolver(fs).resolve('/t/link') == '/t/gone'

    def test_other_resolution_errors_go_to_policy(self):
        fs = InMemoryFileSystemAdapter()
        fs.add_file('/t/file')
        fs.add_symlink('/t/link', '/t/file')
        fs.fail('resolve_link', '/t/link', PermissionError(errno.EACCES, 'denied'))

        with pytest.raises(PermissionError):
            SymlinkResolver(ErrorHandlingAdapter(fs)).resolve('/t/link')

        policy = CollectErrorsPolicy()
        assert SymlinkResolver(ErrorHandlingAdapter(fs, policy)).resolve('/t/link') is None
        assert policy.errors[0]['operation'] == 'resolve_link'

    def test_failed_classification_is_unresolved(self):
        fs = InMemoryFileSystemAdapter()
        fs.add_file('/t/file')
        fs.fail('lstat', '/t/file', PermissionError(errno.EACCES, 'denied'))
        policy = CollectErrorsPolicy()
        assert SymlinkResolver(ErrorHandlingAdapter(fs, policy)).resolve('/t/file') is None
        assert len(policy.errors) == 1


class TestAsyncSymlinkResolver:
    """Async resolver has identical semantics."""

    @pytest.mark.asyncio
    async def test_chain_within_depth(self):
        fs = OneHopFileSystem()
        start = make_chain(fs, 5)
        resolver = AsyncSymlinkResolver(AsyncFileSystemAdapter(fs))
        assert await resolver.resolve(start) == '/t/file'

    @pytest.mark.asyncio
    async def test_chain_beyond_depth_is_unresolved(self):
        fs = OneHopFileSystem()
        start = make_chain(fs, 6)
        resolver = AsyncSymlinkResolver(AsyncFileSystemAdapter(fs))
        assert await resolver.resolve(start) is None

    @pytest.mark.asyncio
    async def test_broken_link_returns_original_path(self):
        fs = InMemoryFileSystemAdapter()
        fs.add_symlink('/t/dangling', '/t/missing')
        resolver = AsyncSymlinkResolver(AsyncFileSystemAdapter(fs))
        assert await resolver.resolve('/t/dangling') == '/t/dangling'

    @pytest.mark.asyncio
    async def test_broken_link_passes_through_error_adapter(self):
        fs = InMemoryFileSystemAdapter()
        fs.add_symlink('/t/loop', '/t/loop')
        policy = CollectErrorsPolicy()
        adapter = ErrorHandlingAdapter(AsyncFileSystemAdapter(fs), policy)
        assert await AsyncSymlinkResolver(adapter).resolve('/t/loop') == '/t/loop'
        assert policy.errors == []

    @pytest.mark.asyncio
    async def test_plain_path(self):
        fs = InMemoryFileSystemAdapter()
        fs.add_dir('/t/dir')
        resolver = AsyncSymlinkResolver(AsyncFileSystemAdapter(fs))
        assert await resolver.resolve('/t/dir') == '/t/dir'
