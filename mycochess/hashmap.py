"""Fixed-size table indexed by a multiplicative magic hash."""

from __future__ import annotations

import random

_TABLE_SIZE = 4096
_U64 = (1 << 64) - 1


class MagicCollisionError(Exception):
    """Two keys with different values landed in the same slot."""


class MagicHashMap:
    """Maps blocker bitboards to move bitboards through a 12-bit magic hash."""

    def __init__(self, magic_number: int | None = None) -> None:
        if magic_number is None:
            magic_number = self._candidate()
        self.magic_number = magic_number & _U64
        self._table = [0] * _TABLE_SIZE

    @staticmethod
    def _candidate() -> int:
        return random.getrandbits(64) & random.getrandbits(64) & random.getrandbits(64)

    def _hash(self, key: int) -> int:
        return ((self.magic_number * key) & _U64) >> 52

    def get(self, key: int) -> int:
        return self._table[self._hash(key)]

    def set(self, key: int, value: int) -> None:
        """Store ``value`` for ``key``; raise MagicCollisionError on a clash."""
        slot = self._hash(key)
        current = self._table[slot]
        if current not in (0, value):
            raise MagicCollisionError(f"slot {slot} already holds a different value")
        self._table[slot] = value