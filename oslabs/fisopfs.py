"""In-memory file system with a single data block per file, saved to an image file."""

from __future__ import annotations

import errno
import logging
import os
import stat
import time
from contextlib import suppress
from dataclasses import dataclass
from os import PathLike

from oslabs.bitmap import Bitmap
from oslabs.inode import (
    DATA_BLOCKS,
    INODE_COUNT,
    INODE_SIZE,
    MAX_BLOCK_SIZE,
    MAX_PATH_LENGTH,
    Inode,
    InodeTable,
)

DEFAULT_IMAGE = "file.fisopfs"
ROOT_UID = 1717

_log = logging.getLogger(__name__)


class FileSystemError(OSError):
    """A file system operation failed; ``errno`` tells why."""


def _error(code: int, path: str | None = None) -> FileSystemError:
    return FileSystemError(code, os.strerror(code), path)


@dataclass(frozen=True)
class Attributes:
    """File attributes as reported by ``getattr``."""

    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    atime: int
    mtime: int
    ctime: int
    dev: int = 0


def _now() -> int:
    return int(time.time())


def _is_dir(inode: Inode) -> bool:
    return inode.mode & stat.S_IFDIR == stat.S_IFDIR


def _is_regular(inode: Inode) -> bool:
    return inode.mode & stat.S_IFREG == stat.S_IFREG


def _mark_used(bitmap: Bitmap, idx: int) -> None:
    # Indices the bitmap cannot hold are silently left unmarked.
    with suppress(IndexError):
        bitmap.set_block(idx)


def _release(bitmap: Bitmap, idx: int) -> None:
    with suppress(IndexError):
        bitmap.free_block(idx)


class FileSystem:
    """File system state plus the operations a mount point performs on it."""

    def __init__(self, image_path: str | PathLike[str] = DEFAULT_IMAGE) -> None:
        self.image_path = os.fspath(image_path)
        self._reset()

    def _reset(self) -> None:
        self.block_size = MAX_BLOCK_SIZE
        self.data_count = DATA_BLOCKS
        self.inode_size = INODE_SIZE
        self.inodes_count = INODE_COUNT
        self.imap = Bitmap(self.inodes_count)
        self.dmap = Bitmap(self.data_count)
        self.inodes = InodeTable()
        self.data_blocks = [bytearray(MAX_BLOCK_SIZE) for _ in range(DATA_BLOCKS)]
        self._init_root()

    def _init_root(self) -> None:
        root = self.inodes.inodes[0]
        now = _now()
        root.block_id = 0
        root.time = root.mtime = root.ctime = now
        root.gid = os.getgid()
        root.path = "/"
        root.mode = stat.S_IFDIR | 0o755
        root.uid = ROOT_UID
        root.link_count = 2
        _mark_used(self.imap, 0)
        _mark_used(self.dmap, 0)

    def init(self) -> FileSystem:
        """Start from a clean file system and load the image file if there is one."""
        self._reset()
        try:
            image = open(self.image_path, "rb")
        except OSError:
            _log.debug("%s not readable, a clean fs is set", self.image_path)
            return self
        with image:
            self.imap.load(image)
            self.dmap.load(image)
            self.inodes.load_all(image)
            for block in self.data_blocks:
                data = image.read(MAX_BLOCK_SIZE)
                if len(data) != MAX_BLOCK_SIZE:
                    raise OSError(errno.EIO, "Error loading data blocks", self.image_path)
                block[:] = data
        return self

    def _lookup(self, path: str) -> Inode:
        inode = self.inodes.find_by_path(path)
        if inode is None:
            raise _error(errno.ENOENT, path)
        return inode

    def getattr(self, path: str) -> Attributes:
        """Return the attributes of ``path``."""
        inode = self._lookup(path)
        return Attributes(
            mode=inode.mode,
            nlink=inode.link_count,
            uid=inode.uid,
            gid=inode.gid,
            size=inode.content_size,
            atime=inode.time,
            mtime=inode.mtime,
            ctime=inode.ctime,
        )

    def readdir(self, path: str) -> list[str]:
        """List the entries of directory ``path``, starting with ``.`` and ``..``."""
        inode = self._lookup(path)
        if not _is_dir(inode):
            raise _error(errno.ENOTDIR, path)
        inode.time = _now()
        names = [".", ".."]
        for entry in self.inodes.inodes:
            if entry.dir_path() == path:
                name = entry.file_name()
                if name is not None:
                    names.append(name)
        return names

    def truncate(self, path: str, size: int) -> None:
        """Cut or zero-extend the content of ``path`` to ``size`` bytes."""
        if size > MAX_BLOCK_SIZE or size < 0:
            raise _error(errno.EINVAL, path)
        inode = self._lookup(path)
        block = self.data_blocks[inode.block_id]
        block[size:] = bytes(MAX_BLOCK_SIZE - size)
        inode.content_size = size
        inode.mtime = _now()

    def read(self, path: str, size: int, offset: int) -> bytes:
        """Read up to ``size`` bytes of ``path`` starting at ``offset``."""
        inode = self._lookup(path)
        if not _is_regular(inode):
            raise _error(errno.EISDIR, path)
        if offset + size > inode.content_size:
            size = inode.content_size - offset
        size = max(size, 0)
        data = bytes(self.data_blocks[inode.block_id][offset : offset + size])
        inode.time = _now()
        return data

    def write(self, path: str, data: bytes, offset: int) -> int:
        """Write ``data`` into ``path`` at ``offset``; return the bytes written."""
        inode = self._lookup(path)
        if not _is_regular(inode):
            raise _error(errno.EISDIR, path)
        if inode.block_id == -1:
            raise _error(errno.ENOMEM, path)
        if offset > self.block_size:
            raise _error(errno.ENOMEM, path)
        offset = min(offset, inode.content_size)
        if offset + len(data) > self.block_size:
            data = data[: self.block_size - offset]
        self.data_blocks[inode.block_id][offset : offset + len(data)] = data
        inode.content_size += len(data)
        now = _now()
        inode.time = now
        inode.mtime = now
        return len(data)

    def _allocate(self, path: str, mode: int, link_count: int) -> None:
        if len(path.encode("utf-8", "surrogateescape")) > MAX_PATH_LENGTH:
            raise _error(errno.ENAMETOOLONG, path)
        inode_idx = self.imap.first_free(self.inodes_count)
        data_idx = self.dmap.first_free(self.data_count)
        if inode_idx >= self.inodes_count or data_idx >= self.data_count:
            raise _error(errno.ENOSPC, path)
        inode = self.inodes.find_by_index(inode_idx)
        if inode is None:
            raise _error(errno.ENOSPC, path)
        now = _now()
        inode.block_id = data_idx
        inode.uid = os.getuid()
        inode.gid = os.getgid()
        inode.path = path
        inode.time = inode.ctime = inode.mtime = now
        inode.mode = mode
        inode.link_count = link_count
        _mark_used(self.imap, inode_idx)
        _mark_used(self.dmap, data_idx)

    def create(self, path: str, mode: int) -> None:
        """Create a regular file at ``path``."""
        self._allocate(path, mode | stat.S_IFREG | 0o644, 1)

    def mkdir(self, path: str, mode: int) -> None:
        """Create a directory at ``path``."""
        self._allocate(path, mode | stat.S_IFDIR | 0o755, 2)

    def rmdir(self, path: str) -> None:
        """Remove the empty directory ``path``."""
        if len(path.encode("utf-8", "surrogateescape")) > MAX_PATH_LENGTH:
            raise _error(errno.ENAMETOOLONG, path)
        inode = self._lookup(path)
        if not _is_dir(inode):
            raise _error(errno.ENOTDIR, path)
        if self.inodes.dir_not_empty(inode):
            raise _error(errno.ENOTEMPTY, path)
        _release(self.imap, self.inodes.find_index(inode))
        _release(self.dmap, inode.block_id)
        inode.clear()

    def unlink(self, path: str) -> None:
        """Remove the regular file ``path`` and wipe its data."""
        inode = self._lookup(path)
        if not _is_regular(inode):
            raise _error(errno.EISDIR, path)
        _release(self.imap, self.inodes.find_index(inode))
        _release(self.dmap, inode.block_id)
        self.data_blocks[inode.block_id][:] = bytes(MAX_BLOCK_SIZE)
        inode.clear()

    def utimens(self, path: str, atime: int, mtime: int) -> None:
        """Set the access and modification times of ``path``, in seconds."""
        inode = self._lookup(path)
        inode.time = int(atime)
        inode.mtime = int(mtime)

    def flush(self) -> None:
        """Save the whole file system to the image file."""
        try:
            image = open(self.image_path, "wb")
        except OSError:
            raise _error(errno.ENOENT, self.image_path) from None
        with image:
            self.imap.save(image)
            self.dmap.save(image)
            self.inodes.save_all(image)
            for block in self.data_blocks:
                if image.write(bytes(block)) != MAX_BLOCK_SIZE:
                    raise OSError(errno.EIO, "Error saving data blocks", self.image_path)
            image.flush()

    def destroy(self) -> None:
        """Save the file system before it goes away."""
        self.flush()