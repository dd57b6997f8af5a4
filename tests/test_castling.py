import pytest

from mycochess.castling import CastlingRights

ALL = 0b00001111


def test_moving_rook_forfeits_castling():
    cr = CastlingRights(ALL)
    cr.forfeit(1)
    assert not cr.is_set(CastlingRights.WHITE_QUEENSIDE)
    assert cr.is_set(CastlingRights.WHITE_KINGSIDE)
    assert cr.is_set(CastlingRights.BLACK_QUEENSIDE)
    assert cr.is_set(CastlingRights.BLACK_KINGSIDE)


def test_moving_black_rook_forfeits_castling():
    cr = CastlingRights(ALL)
    cr.forfeit(0x8000000000000000)
    assert cr.is_set(CastlingRights.WHITE_QUEENSIDE)
    assert cr.is_set(CastlingRights.WHITE_KINGSIDE)
    assert cr.is_set(CastlingRights.BLACK_QUEENSIDE)
    assert not cr.is_set(CastlingRights.BLACK_KINGSIDE)


def test_moving_white_king_forfeits_both():
    cr = CastlingRights(ALL)
    cr.forfeit(16)
    assert not cr.is_set(CastlingRights.WHITE_QUEENSIDE)
    assert not cr.is_set(CastlingRights.WHITE_KINGSIDE)
    assert cr.is_set(CastlingRights.BLACK_QUEENSIDE)
    assert cr.is_set(CastlingRights.BLACK_KINGSIDE)


def test_moving_black_king_forfeits_both():
    cr = CastlingRights(ALL)
    cr.forfeit(0x1000000000000000)
    assert cr.is_set(CastlingRights.WHITE_QUEENSIDE)
    assert cr.is_set(CastlingRights.WHITE_KINGSIDE)
    assert not cr.is_set(CastlingRights.BLACK_QUEENSIDE)
    assert not cr.is_set(CastlingRights.BLACK_KINGSIDE)


def test_moving_other_piece_keeps_rights():
    cr = CastlingRights(ALL)
    cr.forfeit(1 << 27)
    assert cr.bits == ALL


@pytest.mark.parametrize("text", ["KQkq", "Kq", "Qk", "k", "-"])
def test_fen_round_trip(text):
    assert CastlingRights.from_fen(text).to_fen() == text


def test_from_fen_sets_all_bits():
    assert CastlingRights.from_fen("KQkq").bits == ALL
    assert CastlingRights.from_fen("-").bits == 0


def test_from_fen_rejects_bad_character():
    with pytest.raises(ValueError):
        CastlingRights.from_fen("KX")


def test_set_and_unset():
    cr = CastlingRights()
    cr.set(CastlingRights.BLACK_KINGSIDE)
    assert cr.to_fen() == "k"
    cr.set(CastlingRights.WHITE_QUEENSIDE)
    cr.unset(CastlingRights.BLACK_KINGSIDE)
    assert cr.to_fen() == "Q"