"""Enumeration of every subset of a bitmask."""


def calculate_subsets(mask: int) -> list[int]:
    """Return all subsets of ``mask``, ending with the empty set."""
    mask &= (1 << 64) - 1
    subsets = []
    current = 0
    while True:
        current = (current - mask) & mask
        subsets.append(current)
        if current == 0:
            return subsets