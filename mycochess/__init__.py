"""Bitboard chess core: FEN positions, magic sliding-piece tables, evaluation and a move store."""

__version__ = "0.1.0"