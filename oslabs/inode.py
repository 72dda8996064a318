"""Inodes and the fixed table that holds them."""

from __future__ import annotations

import errno
import struct
from dataclasses import dataclass, fields
from typing import BinaryIO

MAX_PATH_LENGTH = 200
MAX_BLOCK_SIZE = 4096
MAX_DIRECTORY_SIZE = 1024
MAX_FS_BLOCKS = 128

_LAYOUT = struct.Struct(f"<IIQ{MAX_PATH_LENGTH}sIIqqqq")

INODE_SIZE = _LAYOUT.size
MAX_INODES_PER_BLOCK = MAX_BLOCK_SIZE // INODE_SIZE
INODE_BLOCKS = MAX_FS_BLOCKS // MAX_INODES_PER_BLOCK
INODE_COUNT = INODE_BLOCKS * MAX_INODES_PER_BLOCK
DATA_BLOCKS = MAX_FS_BLOCKS - INODE_BLOCKS - 3  # superblock and two bitmaps


@dataclass
class Inode:
    """Metadata of one file or directory, identified by its full path."""

    uid: int = 0
    gid: int = 0
    content_size: int = 0
    path: str = ""
    mode: int = 0
    link_count: int = 0
    time: int = 0
    ctime: int = 0
    mtime: int = 0
    block_id: int = 0

    def pack(self) -> bytes:
        """Encode the inode in its fixed on-disk layout."""
        raw_path = self.path.encode("utf-8", "surrogateescape")
        if len(raw_path) > MAX_PATH_LENGTH:
            raise ValueError(f"path longer than {MAX_PATH_LENGTH} bytes")
        return _LAYOUT.pack(
            self.uid,
            self.gid,
            self.content_size,
            raw_path,
            self.mode,
            self.link_count,
            self.time,
            self.ctime,
            self.mtime,
            self.block_id,
        )

    @classmethod
    def unpack(cls, data: bytes) -> Inode:
        """Decode an inode from its on-disk layout."""
        if len(data) != INODE_SIZE:
            raise ValueError(f"an inode takes exactly {INODE_SIZE} bytes")
        uid, gid, size, raw_path, mode, links, atime, ctime, mtime, block = _LAYOUT.unpack(data)
        path = raw_path.split(b"\0", 1)[0].decode("utf-8", "surrogateescape")
        return cls(uid, gid, size, path, mode, links, atime, ctime, mtime, block)

    def _assign(self, other: Inode) -> None:
        for field in fields(self):
            setattr(self, field.name, getattr(other, field.name))

    def clear(self) -> None:
        """Reset every field, leaving the inode unused."""
        self._assign(Inode())

    def file_name(self) -> str | None:
        """Last component of the path, ``/`` for the root, None if unused."""
        if not self.path:
            return None
        return self.path.rpartition("/")[2] or "/"

    def dir_path(self) -> str | None:
        """Path of the containing directory, empty for the root, None if unused."""
        name = self.file_name()
        if name is None:
            return None
        cut = len(self.path) - len(name)
        if cut < 0:
            return None
        head = self.path[:cut]
        if cut > 1:
            head = head[: cut - 1]
        return head

    def dir_name(self) -> str | None:
        """Name of the containing directory, None when there is none."""
        parent = self.dir_path()
        if not parent:
            return None
        return parent.rpartition("/")[2]


class InodeTable:
    """All inodes of the file system, grouped in fixed-size blocks."""

    def __init__(self) -> None:
        self.inodes = [Inode() for _ in range(INODE_COUNT)]

    def find_by_index(self, idx: int) -> Inode | None:
        """Return the inode at ``idx``, or None when out of range."""
        if 0 <= idx < INODE_COUNT:
            return self.inodes[idx]
        return None

    def find_index(self, inode: Inode | None) -> int:
        """Return the index of ``inode`` in the table, or INODE_COUNT."""
        if inode is None:
            return INODE_COUNT
        return next(
            (idx for idx, candidate in enumerate(self.inodes) if candidate is inode),
            INODE_COUNT,
        )

    def find_by_path(self, path: str | None) -> Inode | None:
        """Return the first inode whose path equals ``path``."""
        if path is None:
            return None
        return next((inode for inode in self.inodes if inode.path == path), None)

    def dir_not_empty(self, inode: Inode) -> bool:
        """Tell whether any other inode lives directly inside ``inode``."""
        return any(
            other is not inode and len(other.path) > 1 and other.dir_path() == inode.path
            for other in self.inodes
        )

    def load_all(self, stream: BinaryIO) -> None:
        """Read every inode block from ``stream``, updating inodes in place."""
        block_bytes = MAX_INODES_PER_BLOCK * INODE_SIZE
        for start in range(0, INODE_COUNT, MAX_INODES_PER_BLOCK):
            data = stream.read(block_bytes)
            count = len(data) // INODE_SIZE
            if count == 0:
                raise OSError(errno.EIO, "Error loading inodes")
            block = self.inodes[start : start + count]
            for offset, inode in zip(range(0, count * INODE_SIZE, INODE_SIZE), block):
                inode._assign(Inode.unpack(data[offset : offset + INODE_SIZE]))

    def save_all(self, stream: BinaryIO) -> None:
        """Write every inode block to ``stream``."""
        for start in range(0, INODE_COUNT, MAX_INODES_PER_BLOCK):
            block = self.inodes[start : start + MAX_INODES_PER_BLOCK]
            if not stream.write(b"".join(inode.pack() for inode in block)):
                raise OSError(errno.EIO, "Error saving inodes")