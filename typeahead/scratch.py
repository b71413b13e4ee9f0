"""
Reusable scratch storage for the distance grids.

A grid with at most INLINE_CAPACITY cells is served from a fixed-size array
kept per thread and per element type, so short strings never allocate. Larger
grids get a freshly allocated array of exactly the required size. Callers only
see index access; which storage backs a buffer is private.

A buffer's lifetime is one distance computation. Two live buffers of the same
element type in one thread would share the inline region, so the distance
engine keeps its two grids in different element types.
"""

import threading

import numpy as np

INLINE_CAPACITY = 16 * 16

_inline = threading.local()


def _inline_storage(dtype: np.dtype) -> np.ndarray:
    pool = getattr(_inline, 'pool', None)
    if pool is None:
        pool = _inline.pool = {}
    storage = pool.get(dtype)
    if storage is None:
        storage = pool[dtype] = np.zeros(INLINE_CAPACITY, dtype=dtype)
    return storage


class ScratchBuffer:
    """Flat array of `size` cells, inline for small sizes and heap-backed otherwise."""

    __slots__ = ('_cells', '_size')

    def __init__(self, size: int, dtype=np.int64, fill=0):
        """
        Args:
            size: Number of cells required
            dtype: numpy element type
            fill: Initial value of every cell
        """
        if size < 0:
            raise ValueError(f"buffer size must be non-negative, got {size}")
        dtype = np.dtype(dtype)
        self._size = size
        if size <= INLINE_CAPACITY:
            self._cells = _inline_storage(dtype)
            self._cells[:size] = fill
        else:
            self._cells = np.full(size, fill, dtype=dtype)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < self._size:
            raise IndexError(f"scratch index {index} out of range for size {self._size}")
        return int(self._cells[index])

    def __setitem__(self, index: int, value: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"scratch index {index} out of range for size {self._size}")
        self._cells[index] = value

    def fill_range(self, start: int, values) -> None:
        """Write a sequence of values starting at `start`."""
        values = np.asarray(values)
        end = start + len(values)
        if start < 0 or end > self._size:
            raise IndexError(f"scratch range [{start}, {end}) out of range for size {self._size}")
        self._cells[start:end] = values
