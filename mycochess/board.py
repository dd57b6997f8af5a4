"""Bitboard representation of the pieces on a chess board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

_U64 = (1 << 64) - 1

PAWN, ROOK, KNIGHT, BISHOP, QUEEN, KING, ALL = range(7)

_PIECE_LETTERS = "PRNBQK"
_WHITE_SYMBOLS = "♙♖♘♗♕♔"
_BLACK_SYMBOLS = "♟♜♞♝♛♚"


class Turn(Enum):
    """The side to move."""

    WHITE = 0
    BLACK = 1

    def other(self) -> Turn:
        return Turn.BLACK if self is Turn.WHITE else Turn.WHITE


def _empty_side() -> list[int]:
    return [0] * 8


@dataclass
class Board:
    """Per side: pawns, rooks, knights, bishops, queens, king, all pieces, unused."""

    white: list[int] = field(default_factory=_empty_side)
    black: list[int] = field(default_factory=_empty_side)

    @classmethod
    def new_empty(cls) -> Board:
        return cls()

    @classmethod
    def new_default(cls) -> Board:
        return cls.from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")

    @classmethod
    def from_fen(cls, text: str) -> Board:
        """Parse the piece-placement field of a FEN string."""
        board = cls()
        rank, file = 7, 0
        for char in text:
            if file > 8:
                raise ValueError(
                    f"Invalid number of squares in rank {rank} of FEN string: {text}"
                )
            if char.upper() in _PIECE_LETTERS and char.isalpha():
                square = rank * 8 + file
                if not 0 <= square < 64:
                    raise ValueError(f"Square out of range in FEN string: {text}")
                side = board.white if char.isupper() else board.black
                side[_PIECE_LETTERS.index(char.upper())] |= 1 << square
                file += 1
            elif char in "12345678":
                file += int(char)
            elif char == "/":
                rank -= 1
                file = 0
            else:
                raise ValueError(f"Unrecognized character '{char}' in FEN string: {text}")

        for side in (board.white, board.black):
            combined = 0
            for bits in side[:KING + 1]:
                combined |= bits
            side[ALL] = combined
        return board

    def _piece_index(self, square_bit: int) -> tuple[bool, int] | None:
        for is_white, side in ((True, self.white), (False, self.black)):
            for piece in range(KING + 1):
                if side[piece] & square_bit:
                    return is_white, piece
        return None

    def _render(self, empty_as_count: bool, white_chars: str, black_chars: str) -> list[str]:
        rows = []
        for rank in range(7, -1, -1):
            row = ""
            empty = 0
            for file in range(8):
                found = self._piece_index(1 << (rank * 8 + file))
                if found is None:
                    if empty_as_count:
                        empty += 1
                    else:
                        row += "·"
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                is_white, piece = found
                row += (white_chars if is_white else black_chars)[piece]
            if empty:
                row += str(empty)
            rows.append(row)
        return rows

    def to_fen(self) -> str:
        """Render as the piece-placement field of a FEN string."""
        return "/".join(
            self._render(True, _PIECE_LETTERS, _PIECE_LETTERS.lower())
        )

    def white_pieces(self) -> int:
        return self.white[ALL]

    def black_pieces(self) -> int:
        return self.black[ALL]

    def all(self) -> int:
        return self.white[ALL] | self.black[ALL]

    def empty(self) -> int:
        return ~self.all() & _U64

    def _side(self, turn: Turn) -> list[int]:
        return self.white if turn is Turn.WHITE else self.black

    def pawns(self, turn: Turn) -> int:
        return self._side(turn)[PAWN]

    def rooks(self, turn: Turn) -> int:
        return self._side(turn)[ROOK]

    def knights(self, turn: Turn) -> int:
        return self._side(turn)[KNIGHT]

    def bishops(self, turn: Turn) -> int:
        return self._side(turn)[BISHOP]

    def queens(self, turn: Turn) -> int:
        return self._side(turn)[QUEEN]

    def king(self, turn: Turn) -> int:
        return self._side(turn)[KING]

    def all_pieces(self, turn: Turn) -> int:
        return self._side(turn)[ALL]

    def __str__(self) -> str:
        rows = self._render(False, _WHITE_SYMBOLS, _BLACK_SYMBOLS)
        return "".join(row + "\n" for row in rows)