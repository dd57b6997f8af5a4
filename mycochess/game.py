"""A full chess position: pieces, side to move, castling, en passant and clocks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .board import Board, Turn
from .castling import CastlingRights

_FILES = "abcdefgh"
_RANKS = "12345678"
_U32_LIMIT = 1 << 32
_COUNTER = re.compile(r"\+?[0-9]+")

_TURN_SYMBOLS = {"w": Turn.WHITE, "b": Turn.BLACK}

DEFAULT_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def square_to_bitboard(name: str) -> int:
    """Return the single-bit bitboard for a square name such as ``"e3"``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square: {name}")
    return 1 << (_RANKS.index(name[1]) * 8 + _FILES.index(name[0]))


def bitboard_to_square(bitboard: int) -> str:
    """Return the square name for a bitboard holding exactly one square."""
    if bitboard <= 0 or bitboard >= 1 << 64 or bitboard.bit_count() != 1:
        raise ValueError(f"Bitboard must hold exactly one square: {bitboard:#x}")
    index = bitboard.bit_length() - 1
    return _FILES[index % 8] + _RANKS[index // 8]


def _parse_counter(value: str, what: str, text: str) -> int:
    if not _COUNTER.fullmatch(value):
        raise ValueError(f"Expected numeric value for {what}: {text}")
    number = int(value)
    if number >= _U32_LIMIT:
        raise ValueError(f"Expected numeric value for {what}: {text}")
    return number


@dataclass
class Game:
    """A position together with the state FEN records alongside it."""

    board: Board = field(default_factory=Board)
    turn: Turn = Turn.WHITE
    castling_rights: CastlingRights = field(default_factory=CastlingRights)
    en_passant: int = 0
    halfmove_clock: int = 0
    fullmove_number: int = 1

    @classmethod
    def new_default(cls) -> Game:
        """The standard starting position."""
        return cls.from_fen(DEFAULT_FEN)

    @classmethod
    def from_fen(cls, text: str) -> Game:
        """Parse a complete FEN string."""
        fields = iter(text.split(" "))

        def next_field() -> str:
            value = next(fields, None)
            if value is None:
                raise ValueError(f"Invalid FEN string: {text}")
            return value

        board = Board.from_fen(next_field())

        turn_symbol = next_field()
        try:
            turn = _TURN_SYMBOLS[turn_symbol]
        except KeyError:
            raise ValueError(
                f"Expected 'w' or 'b' at position 2 in FEN string: {text}"
            ) from None

        castling_rights = CastlingRights.from_fen(next_field())

        en_passant_field = next_field()
        en_passant = 0 if en_passant_field == "-" else square_to_bitboard(en_passant_field)

        halfmove_clock = _parse_counter(next_field(), "halfmove clock at position 5", text)
        fullmove_number = _parse_counter(next_field(), "fullmove number at position 6", text)

        return cls(
            board=board,
            turn=turn,
            castling_rights=castling_rights,
            en_passant=en_passant,
            halfmove_clock=halfmove_clock,
            fullmove_number=fullmove_number,
        )

    def to_fen(self) -> str:
        """Render the position as a complete FEN string."""
        turn_symbol = "w" if self.turn is Turn.WHITE else "b"
        en_passant = "-" if self.en_passant == 0 else bitboard_to_square(self.en_passant)
        return " ".join(
            (
                self.board.to_fen(),
                turn_symbol,
                self.castling_rights.to_fen(),
                en_passant,
                str(self.halfmove_clock),
                str(self.fullmove_number),
            )
        )