"""Fixed-size bitmap that tracks which blocks are in use."""

from __future__ import annotations

import errno
import math
from typing import BinaryIO

# Bytes taken by the descriptor fields (data pointer and length) of a bitmap.
_HEADER_SIZE = 16


class Bitmap:
    """Bit array with one bit per block; a clear bit marks a free block.

    Bits are located the way the on-disk format expects: an index selects
    byte ``idx // bound`` and bit ``idx % bound`` of that byte, with bits
    past the eighth falling outside the byte.
    """

    def __init__(self, count: int) -> None:
        self.bits = bytearray(math.ceil(count / 8))

    @property
    def bound(self) -> int:
        """Length of the bit array in bytes."""
        return len(self.bits)

    def size(self) -> int:
        """Size in bytes of the bitmap descriptor plus its bit array."""
        return _HEADER_SIZE + self.bound

    def _locate(self, idx: int) -> tuple[int, int]:
        byte = idx // self.bound
        mask = (1 << (idx % self.bound)) & 0xFF
        return byte, mask

    def block_is_free(self, idx: int) -> bool:
        """Tell whether block ``idx`` is free."""
        if idx < 0 or idx >= self.bound * 8:
            raise IndexError(f"block index {idx} out of range")
        byte, mask = self._locate(idx)
        return self.bits[byte] & mask == 0

    def set_block(self, idx: int) -> None:
        """Mark block ``idx`` as used."""
        if idx < 0 or idx >= self.bound:
            raise IndexError(f"block index {idx} out of range")
        byte, mask = self._locate(idx)
        self.bits[byte] |= mask

    def free_block(self, idx: int) -> None:
        """Flip the bit of block ``idx``, releasing a used block."""
        if idx < 0 or idx >= self.bound:
            raise IndexError(f"block index {idx} out of range")
        byte, mask = self._locate(idx)
        self.bits[byte] ^= mask

    def first_free(self, blocks_q: int) -> int:
        """Return the first free block index, or ``bound * 8`` if there is none.

        Only the first ``blocks_q`` bit positions of each byte are examined.
        """
        for i, byte in enumerate(self.bits):
            for j in range(blocks_q):
                mask = (1 << j) & 0xFF
                if byte & mask == 0:
                    return i * 8 + j
        return self.bound * 8

    def load(self, stream: BinaryIO) -> None:
        """Read the bit array from ``stream``."""
        data = stream.read(self.bound)
        if not data:
            raise OSError(errno.EIO, "Error loading bitmap")
        self.bits[: len(data)] = data

    def save(self, stream: BinaryIO) -> None:
        """Write the bit array to ``stream``."""
        if not stream.write(bytes(self.bits)):
            raise OSError(errno.EIO, "Error saving bitmap")