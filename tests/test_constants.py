from functools import reduce
from operator import or_

import pytest

from mycochess.constants import (
    A_FILE,
    ANTIDIAGONAL_MASKS,
    DIAGONAL_MASKS,
    EIGHTH_RANK,
    FILEOF,
    FILES,
    FIRST_RANK,
    H_FILE,
    RANKOF,
    get_file,
    get_rank,
)

ALL_SQUARES = (1 << 64) - 1
FILE_LETTERS = "abcdefgh"
RANK_DIGITS = "12345678"


@pytest.mark.parametrize("letter,index", [(c, i) for i, c in enumerate(FILE_LETTERS)])
def test_get_file_matches_file_table(letter, index):
    assert get_file(letter) == FILES[index]


def test_get_file_known_edges():
    assert get_file("a") == A_FILE
    assert get_file("h") == H_FILE


@pytest.mark.parametrize("bad", ["i", "A", "1", "", "ab"])
def test_get_file_unknown_is_empty(bad):
    assert get_file(bad) == 0


def test_get_rank_known_edges():
    assert get_rank("1") == FIRST_RANK
    assert get_rank("8") == EIGHTH_RANK


@pytest.mark.parametrize("bad", ["0", "9", "a", ""])
def test_get_rank_unknown_is_empty(bad):
    assert get_rank(bad) == 0


def test_files_partition_the_board():
    files = [get_file(letter) for letter in FILE_LETTERS]
    assert reduce(or_, files) == ALL_SQUARES
    assert sum(f.bit_count() for f in files) == 64


def test_ranks_partition_the_board():
    ranks = [get_rank(digit) for digit in RANK_DIGITS]
    assert reduce(or_, ranks) == ALL_SQUARES
    assert sum(r.bit_count() for r in ranks) == 64


@pytest.mark.parametrize("square", range(64))
def test_fileof_and_rankof_match_lookups(square):
    bit = 1 << square
    file_mask = get_file(FILE_LETTERS[square % 8])
    rank_mask = get_rank(RANK_DIGITS[square // 8])
    assert FILEOF[square] == file_mask
    assert RANKOF[square] == rank_mask
    assert file_mask & rank_mask == bit


@pytest.mark.parametrize("masks", [DIAGONAL_MASKS, ANTIDIAGONAL_MASKS])
def test_diagonals_cross_each_file_and_rank_at_most_once(masks):
    assert reduce(or_, masks) == ALL_SQUARES
    assert sum(d.bit_count() for d in masks) == 64
    for mask in masks:
        for letter in FILE_LETTERS:
            assert (mask & get_file(letter)).bit_count() <= 1
        for digit in RANK_DIGITS:
            assert (mask & get_rank(digit)).bit_count() <= 1