"""Sliding-piece attack sets computed by walking rays to the first blocker."""

from .constants import A_FILE, EIGHTH_RANK, FIRST_RANK, H_FILE

_ROOK_RAYS = (
    (8, ~EIGHTH_RANK),
    (-8, ~FIRST_RANK),
    (1, ~H_FILE),
    (-1, ~A_FILE),
)

_BISHOP_RAYS = (
    (9, ~(EIGHTH_RANK | H_FILE)),
    (-7, ~(FIRST_RANK | H_FILE)),
    (-9, ~(FIRST_RANK | A_FILE)),
    (7, ~(EIGHTH_RANK | A_FILE)),
)


def _raycast(piece: int, blockers: int, rays) -> int:
    result = 0
    for shift, edge in rays:
        ray = piece & edge
        while ray:
            ray = ray << shift if shift > 0 else ray >> -shift
            result |= ray
            ray &= edge & ~blockers
    return result


def raycast_rook(rook: int, blockers: int) -> int:
    """Squares a rook on ``rook`` attacks, stopping at (and including) blockers."""
    if rook.bit_count() != 1:
        raise ValueError(
            "Raycast failed - provided bitboard must contain exactly one rook bit set."
        )
    return _raycast(rook, blockers, _ROOK_RAYS)


def raycast_bishop(bishop: int, blockers: int) -> int:
    """Squares a bishop on ``bishop`` attacks, stopping at (and including) blockers."""
    if bishop.bit_count() != 1:
        raise ValueError(
            "Raycast failed - provided bitboard must contain exactly one bishop bit set."
        )
    return _raycast(bishop, blockers, _BISHOP_RAYS)