"""Relevant-occupancy masks for rooks and bishops."""

from .constants import A_FILE, EIGHTH_RANK, FIRST_RANK, H_FILE


def _ray_mask(square: int, rays) -> int:
    if square.bit_count() != 1:
        raise ValueError("mask can only be calculated for a single piece")
    result = 0
    for shift, edge in rays:
        ray = square & edge
        while ray:
            ray = ray << shift if shift > 0 else ray >> -shift
            ray &= edge
            result |= ray
    return result


def calculate_rook_mask(square: int) -> int:
    """Squares whose occupancy affects a rook on ``square``, edges excluded."""
    return _ray_mask(
        square,
        (
            (8, ~EIGHTH_RANK),
            (-8, ~FIRST_RANK),
            (1, ~H_FILE),
            (-1, ~A_FILE),
        ),
    )


def calculate_bishop_mask(square: int) -> int:
    """Squares whose occupancy affects a bishop on ``square``, edges excluded."""
    return _ray_mask(
        square,
        (
            (9, ~(EIGHTH_RANK | H_FILE)),
            (-7, ~(FIRST_RANK | H_FILE)),
            (-9, ~(FIRST_RANK | A_FILE)),
            (7, ~(EIGHTH_RANK | A_FILE)),
        ),
    )


ROOK_MASKS = tuple(calculate_rook_mask(1 << sq) for sq in range(64))
BISHOP_MASKS = tuple(calculate_bishop_mask(1 << sq) for sq in range(64))


def _square_index(bitboard: int) -> int:
    if bitboard == 0:
        raise ValueError("bitboard has no square set")
    return (bitboard & -bitboard).bit_length() - 1


def get_rook_mask(rook: int) -> int:
    """Mask for the lowest set square of ``rook``."""
    return ROOK_MASKS[_square_index(rook)]


def get_bishop_mask(bishop: int) -> int:
    """Mask for the lowest set square of ``bishop``."""
    return BISHOP_MASKS[_square_index(bishop)]