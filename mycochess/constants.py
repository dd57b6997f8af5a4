"""Bitboard constants for ranks, files and diagonals."""

FIRST_RANK = 0xFF
SECOND_RANK = 0xFF00
THIRD_RANK = 0xFF0000
FOURTH_RANK = 0xFF000000
FIFTH_RANK = 0xFF00000000
SIXTH_RANK = 0xFF0000000000
SEVENTH_RANK = 0xFF000000000000
EIGHTH_RANK = 0xFF00000000000000

BACK_RANKS = FIRST_RANK | EIGHTH_RANK

A_FILE = 0x101010101010101
B_FILE = 0x202020202020202
C_FILE = 0x404040404040404
D_FILE = 0x808080808080808
E_FILE = 0x1010101010101010
F_FILE = 0x2020202020202020
G_FILE = 0x4040404040404040
H_FILE = 0x8080808080808080

ROOK_START_POSITIONS = 0x8100000000000081
KING_START_POSITIONS = 0x1000000000000010

FILES = (A_FILE, B_FILE, C_FILE, D_FILE, E_FILE, F_FILE, G_FILE, H_FILE)
RANKS = (
    FIRST_RANK,
    SECOND_RANK,
    THIRD_RANK,
    FOURTH_RANK,
    FIFTH_RANK,
    SIXTH_RANK,
    SEVENTH_RANK,
    EIGHTH_RANK,
)

# Diagonal - / - NE and SW
DIAGONAL_MASKS = (
    0x100000000000000,
    0x201000000000000,
    0x402010000000000,
    0x804020100000000,
    0x1008040201000000,
    0x2010080402010000,
    0x4020100804020100,
    0x8040201008040201,
    0x80402010080402,
    0x804020100804,
    0x8040201008,
    0x80402010,
    0x804020,
    0x8040,
    0x80,
)

# Antidiagonal - \ - NW and SE
ANTIDIAGONAL_MASKS = (
    0x1,
    0x102,
    0x10204,
    0x1020408,
    0x102040810,
    0x10204081020,
    0x1020408102040,
    0x102040810204080,
    0x204081020408000,
    0x408102040800000,
    0x810204080000000,
    0x1020408000000000,
    0x2040800000000000,
    0x4080000000000000,
    0x8000000000000000,
)

FILEOF = tuple(FILES[square % 8] for square in range(64))
RANKOF = tuple(RANKS[square // 8] for square in range(64))


def get_file(file: str) -> int:
    """Return the bitboard of the file named by a letter 'a'-'h', or 0 otherwise."""
    if len(file) == 1 and "a" <= file <= "h":
        return FILES[ord(file) - ord("a")]
    return 0


def get_rank(rank: str) -> int:
    """Return the bitboard of the rank named by a digit '1'-'8', or 0 otherwise."""
    if len(rank) == 1 and "1" <= rank <= "8":
        return RANKS[ord(rank) - ord("1")]
    return 0