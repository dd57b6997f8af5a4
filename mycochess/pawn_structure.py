"""Pawn-structure evaluation: doubled, isolated and blocked pawns."""

from __future__ import annotations

from .board import KING, PAWN
from .constants import A_FILE, FILEOF, H_FILE
from .game import Game

DOUBLED_PAWN_PENALTY = 50
BLOCKED_PAWN_PENALTY = 50
ISOLATED_PAWN_PENALTY = 50

_U64 = (1 << 64) - 1


def _side_penalty(pawns: int, king: int) -> int:
    penalty = 0
    remaining = pawns
    while remaining:
        current = remaining & -remaining
        file = FILEOF[current.bit_length() - 1]
        penalty += (file & pawns & ~current).bit_count() * DOUBLED_PAWN_PENALTY

        adjacent_files = ((file & ~A_FILE) >> 1) | (((file & ~H_FILE) << 1) & _U64)
        if adjacent_files & king == 0:
            penalty += ISOLATED_PAWN_PENALTY

        remaining ^= current
    return penalty


def calculate_pawn_structure_value(game: Game) -> int:
    """Pawn-structure score, positive when white's structure is better."""
    white = game.board.white
    black = game.board.black

    value = _side_penalty(black[PAWN], black[KING]) - _side_penalty(
        white[PAWN], white[KING]
    )

    white_pawns, black_pawns = white[PAWN], black[PAWN]
    value -= (((white_pawns << 8) & _U64) & black_pawns).bit_count() * BLOCKED_PAWN_PENALTY
    value += ((black_pawns >> 8) & white_pawns).bit_count() * BLOCKED_PAWN_PENALTY
    return value