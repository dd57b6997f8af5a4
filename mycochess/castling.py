"""Castling rights held as a four-bit set."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CastlingRights:
    """Which castling moves are still available to each side."""

    bits: int = 0

    WHITE_QUEENSIDE = 1
    WHITE_KINGSIDE = 2
    BLACK_QUEENSIDE = 4
    BLACK_KINGSIDE = 8

    @classmethod
    def from_fen(cls, text: str) -> CastlingRights:
        """Parse the castling field of a FEN string."""
        symbols = {
            "K": cls.WHITE_KINGSIDE,
            "Q": cls.WHITE_QUEENSIDE,
            "k": cls.BLACK_KINGSIDE,
            "q": cls.BLACK_QUEENSIDE,
            "-": 0,
        }
        bits = 0
        for char in text:
            try:
                bits |= symbols[char]
            except KeyError:
                raise ValueError(f"Invalid castling rights string {text}") from None
        return cls(bits)

    def to_fen(self) -> str:
        """Render as the castling field of a FEN string."""
        order = (
            (self.WHITE_KINGSIDE, "K"),
            (self.WHITE_QUEENSIDE, "Q"),
            (self.BLACK_KINGSIDE, "k"),
            (self.BLACK_QUEENSIDE, "q"),
        )
        text = "".join(symbol for right, symbol in order if self.is_set(right))
        return text or "-"

    def set(self, value: int) -> None:
        self.bits |= value

    def unset(self, value: int) -> None:
        self.bits &= ~value

    def is_set(self, value: int) -> bool:
        return self.bits & value > 0

    def forfeit(self, orig: int) -> None:
        """Drop the rights lost by moving a piece from the squares in ``orig``."""
        lost = (
            (orig & 1)  # white queenside rook
            | ((orig & 128) >> 6)  # white kingside rook
            | ((orig & 0x100000000000000) >> 54)  # black queenside rook
            | ((orig & 0x8000000000000000) >> 60)  # black kingside rook
            | ((orig & 16) >> 4)  # white king
            | ((orig & 16) >> 3)
            | ((orig & 0x1000000000000000) >> 58)  # black king
            | ((orig & 0x1000000000000000) >> 57)
        )
        self.bits &= ~lost & 0xFF