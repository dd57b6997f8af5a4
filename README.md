# mycochess

A compact chess core built on 64-bit bitboards. It reads and writes FEN,
builds magic lookup tables for sliding pieces, scores positions by material,
piece-square tables and pawn structure, and keeps known moves per position
hash in SQLite.

The package has no runtime dependencies beyond the Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Positions

```python
from mycochess.game import Game

game = Game.new_default()
print(game.to_fen())
# rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1

endgame = Game.from_fen("3R1n1k/1B4pp/1p6/5p2/p7/4P1P1/PP3P1P/RN4K1 b - - 0 48")
print(endgame.board)   # a Unicode diagram of the board
```

`Game.from_fen` raises `ValueError` for malformed FEN strings.

Squares are bitboards: a single set bit, with a1 as bit 0 and h8 as bit 63.
`square_to_bitboard` and `bitboard_to_square` in `mycochess.game` convert
between that form and names such as `"e4"`.

The `Board` class in `mycochess.board` holds the pieces for each side and
offers per-piece queries such as `board.pawns(Turn.WHITE)`,
`board.king(Turn.BLACK)`, `board.all()` and `board.empty()`, as well as
`Board.from_fen` / `to_fen` for the piece-placement field.
`CastlingRights` in `mycochess.castling` tracks the four castling flags and
can drop them with `forfeit` when a king or rook leaves its home square.
`mycochess.constants` provides rank and file bitboards, with `get_file("e")`
and `get_rank("4")` looking them up by name.

## Evaluation

Scores are in centipawns from White's point of view.

```python
from mycochess.game import Game
from mycochess.piece import calculate_piece_value
from mycochess.pawn_structure import calculate_pawn_structure_value

game = Game.from_fen("8/5k2/8/1p6/7P/2K5/8/8 w - - 0 1")
calculate_piece_value(game)            # -3
calculate_pawn_structure_value(game)   # doubled, isolated and blocked pawns
```

`calculate_piece_value` switches to the endgame piece-square tables when
fewer than 14 pieces remain, or fewer than 20 with no queens on the board.
The tables themselves are in `mycochess.piece_tables`.

`EvaluationCache` in `mycochess.cache` is a thread-safe map from a hash key to
a score (`get` returns `None` for unknown keys); `EVALUATION_CACHE` is a
shared instance.

## Sliding-piece tables

```python
from mycochess.magic import get_rook_magic_map, get_bishop_magic_map

rook_tables = get_rook_magic_map()      # one MagicHashMap per square
d4 = rook_tables[27]
d4.get(8796361457664)                   # 8830839162888: squares reachable for that blocker set
```

The tables are built once on first use and shared afterwards; building them
searches for random magic numbers, so the first call takes a moment. The
building blocks are available separately: `calculate_subsets`
(`mycochess.subsets`), `raycast_rook` / `raycast_bishop`
(`mycochess.raycast`), `get_rook_mask` / `get_bishop_mask`
(`mycochess.masks`) and `MagicHashMap` (`mycochess.hashmap`), whose `set`
raises `MagicCollisionError` when two keys clash.

## Move database

`mycochess.database` stores known moves per position hash in SQLite:

```python
from mycochess.database import MovesEntry, get_connection

connection = get_connection("moves.db3")
MovesEntry.create_tables(connection)
MovesEntry(1234, ["e2e4"]).insert(connection)
entry = MovesEntry.find_by_hash(connection, 1234)   # MovesEntry(hash_value=1234, moves=['e2e4'])
```

`find_by_hash` returns `None` when nothing is stored for the hash. Called
without a path, `get_connection` opens `resources/myco.db3` inside the
package directory (`database_path()`); that directory is not created for you.

## What it does not do

This package describes and scores positions; it does not play chess. It has
no move application or move generation, no legality checks, no Zobrist
hashing of positions, no search, no game-file import to fill the move
database, and no command-line program or engine protocol. Hash keys for the
cache and the move database have to be supplied by the caller.