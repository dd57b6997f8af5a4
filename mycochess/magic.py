"""Magic-hashed lookup tables of sliding-piece moves for every square."""

from __future__ import annotations

import random
from functools import cache

from .hashmap import MagicHashMap
from .masks import get_bishop_mask, get_rook_mask
from .raycast import raycast_bishop, raycast_rook
from .subsets import calculate_subsets

_U64 = (1 << 64) - 1


def _random_candidate() -> int:
    return random.getrandbits(64) & random.getrandbits(64) & random.getrandbits(64)


def _fits(magic: int, pairs: list[tuple[int, int]]) -> bool:
    """True if ``magic`` maps every blocker set to a slot without a clash."""
    table: dict[int, int] = {}
    for blockers, moves in pairs:
        slot = ((magic * blockers) & _U64) >> 52
        current = table.get(slot, 0)
        if current and current != moves:
            return False
        table[slot] = moves
    return True


def _build_hashmap(pairs: list[tuple[int, int]]) -> MagicHashMap:
    magic = _random_candidate()
    while not _fits(magic, pairs):
        magic = _random_candidate()
    hashmap = MagicHashMap(magic)
    for blockers, moves in pairs:
        hashmap.set(blockers, moves)
    return hashmap


def generate_rook_magic_hashmap(rook: int) -> MagicHashMap:
    """Build a collision-free table of rook moves for the square in ``rook``."""
    pairs = [
        (blockers, raycast_rook(rook, blockers))
        for blockers in calculate_subsets(get_rook_mask(rook))
    ]
    return _build_hashmap(pairs)


def generate_bishop_magic_hashmap(bishop: int) -> MagicHashMap:
    """Build a collision-free table of bishop moves for the square in ``bishop``."""
    pairs = [
        (blockers, raycast_bishop(bishop, blockers))
        for blockers in calculate_subsets(get_bishop_mask(bishop))
    ]
    return _build_hashmap(pairs)


@cache
def get_rook_magic_map() -> tuple[MagicHashMap, ...]:
    """Rook tables for squares 0-63, computed once."""
    return tuple(generate_rook_magic_hashmap(1 << square) for square in range(64))


@cache
def get_bishop_magic_map() -> tuple[MagicHashMap, ...]:
    """Bishop tables for squares 0-63, computed once."""
    return tuple(generate_bishop_magic_hashmap(1 << square) for square in range(64))