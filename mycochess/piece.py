"""Material and piece-square evaluation of a position."""

from __future__ import annotations

from collections.abc import Iterator

from .board import KING, QUEEN
from .game import Game
from .piece_tables import (
    BLACK_PIECE_TABLES,
    ENDGAME_OFFSET,
    TABLE_STRIDE,
    WHITE_PIECE_TABLES,
)

KING_VALUE = 10_000_000
QUEEN_VALUE = 900
ROOK_VALUE = 500
BISHOP_VALUE = 325
KNIGHT_VALUE = 300
PAWN_VALUE = 100

# In board order: pawns, rooks, knights, bishops, queens, king.
PIECE_VALUES = (
    PAWN_VALUE,
    ROOK_VALUE,
    KNIGHT_VALUE,
    BISHOP_VALUE,
    QUEEN_VALUE,
    KING_VALUE,
)


def _squares(bitboard: int) -> Iterator[int]:
    while bitboard:
        lowest = bitboard & -bitboard
        yield lowest.bit_length() - 1
        bitboard ^= lowest


def _side_value(pieces: list[int], tables: tuple[int, ...], phase_offset: int) -> int:
    value = 0
    for piece in range(KING + 1):
        bitboard = pieces[piece]
        value += bitboard.bit_count() * PIECE_VALUES[piece]
        base = piece * TABLE_STRIDE + phase_offset
        value += sum(tables[base + square] for square in _squares(bitboard))
    return value


def calculate_piece_value(game: Game) -> int:
    """Material plus piece-square score, positive when white is better."""
    board = game.board
    piece_count = board.all().bit_count()
    no_queens = (board.white[QUEEN] | board.black[QUEEN]) == 0
    is_endgame = piece_count < 14 or (piece_count < 20 and no_queens)
    phase_offset = ENDGAME_OFFSET if is_endgame else 0

    return _side_value(board.white, WHITE_PIECE_TABLES, phase_offset) - _side_value(
        board.black, BLACK_PIECE_TABLES, phase_offset
    )