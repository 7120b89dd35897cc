"""A fixed-size bitset that can be written from several threads."""

from __future__ import annotations

import operator
import threading
from collections.abc import Iterable, Iterator

__all__ = ["Bitset"]


class Bitset:
    """Fixed-size set of bits; bits can only be set, never cleared."""

    def __init__(self, size: int = 0) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._bits = 0
        self._lock = threading.Lock()

    @classmethod
    def from_bools(cls, data: Iterable[bool]) -> Bitset:
        """Build a bitset of the same length as data, with data's true bits set."""
        values = list(data)
        bitset = cls(len(values))
        bitset.set_from(values)
        return bitset

    def set_from(self, data: Iterable[bool]) -> None:
        """Set every bit whose entry in data is true."""
        values = list(data)
        if len(values) > self._size:
            raise ValueError("data is longer than the bitset")
        mask = 0
        for idx, value in enumerate(values):
            if value:
                mask |= 1 << idx
        with self._lock:
            self._bits |= mask

    def _check(self, idx) -> int:
        idx = operator.index(idx)
        if not 0 <= idx < self._size:
            raise IndexError("Index out of range")
        return idx

    def __getitem__(self, idx) -> bool:
        idx = self._check(idx)
        return bool((self._bits >> idx) & 1)

    def set(self, idx) -> None:
        """Set a single bit."""
        idx = self._check(idx)
        with self._lock:
            self._bits |= 1 << idx

    def set_range(self, idx_start, idx_end) -> None:
        """Set every bit between the two indices, both inclusive, in either order."""
        start = self._check(idx_start)
        end = self._check(idx_end)
        if start > end:
            start, end = end, start
        mask = ((1 << (end - start + 1)) - 1) << start
        with self._lock:
            self._bits |= mask

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bool]:
        bits = self._bits
        for idx in range(self._size):
            yield bool((bits >> idx) & 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self._size == other._size and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Bitset:
        """Return an independent copy."""
        duplicate = Bitset(self._size)
        duplicate._bits = self._bits
        return duplicate

    __copy__ = copy

    def __repr__(self) -> str:
        return f"Bitset({''.join('1' if bit else '0' for bit in self)!r})"