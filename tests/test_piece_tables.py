import pytest

from mycochess.piece_tables import (
    BLACK_PIECE_TABLES,
    ENDGAME_OFFSET,
    KING_EG_PS_TABLE,
    PAWN_MG_PS_TABLE,
    TABLE_STRIDE,
    WHITE_PIECE_TABLES,
    _build_tables,
    _parse_table,
)


@pytest.mark.parametrize("index", [64, 129, 194, 259, 519, 779])
def test_zero_indices_set(index):
    assert _build_tables(mirror=False)[index] == 0
    assert _build_tables(mirror=True)[index] == 0


def test_built_tables_match_module_tables():
    white = _build_tables(mirror=False)
    black = _build_tables(mirror=True)
    assert white == WHITE_PIECE_TABLES
    assert black == BLACK_PIECE_TABLES
    assert len(white) == 780
    assert len(black) == 780
    assert ENDGAME_OFFSET == 6 * TABLE_STRIDE


def test_white_table_starts_with_pawn_middlegame():
    white = _build_tables(mirror=False)
    assert white[:64] == PAWN_MG_PS_TABLE
    assert white[8] == -35


def test_white_king_endgame_block():
    white = _build_tables(mirror=False)
    start = 11 * TABLE_STRIDE
    assert white[start:start + 64] == KING_EG_PS_TABLE
    assert white[start + 18] == 11


def test_black_tables_are_vertical_mirror():
    white = _build_tables(mirror=False)
    black = _build_tables(mirror=True)
    for block in range(12):
        base = block * TABLE_STRIDE
        for square in (0, 7, 13, 33, 53, 63):
            mirrored = (7 - square // 8) * 8 + square % 8
            assert black[base + square] == white[base + mirrored]


def test_black_pawn_values_on_known_squares():
    black = _build_tables(mirror=True)
    # f7 for black reads f2 of the white table, b5 reads b4.
    assert black[ENDGAME_OFFSET + 5 * TABLE_STRIDE + 53] == 4
    assert black[ENDGAME_OFFSET + 33] == 9


def test_parse_table_puts_first_rank_first():
    text = "\n".join(" ".join(str(rank * 10 + file) for file in range(8)) for rank in range(7, -1, -1))
    table = _parse_table(text)
    assert table[0] == 0
    assert table[7] == 7
    assert table[8] == 10
    assert table[63] == 77


@pytest.mark.parametrize(
    "text",
    [
        "1 2 3",
        "\n".join(["0 0 0 0 0 0 0 0"] * 7),
        "\n".join(["0 0 0 0 0 0 0"] * 8),
    ],
)
def test_parse_table_rejects_wrong_shape(text):
    with pytest.raises(ValueError):
        _parse_table(text)