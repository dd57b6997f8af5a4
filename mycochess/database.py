"""SQLite store of moves played from positions identified by Zobrist hash."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from pathlib import Path

_U64 = (1 << 64) - 1


def _to_signed(value: int) -> int:
    value &= _U64
    return value - (1 << 64) if value >= 1 << 63 else value


def database_path() -> Path:
    """Location of the engine's move database, next to the package."""
    return Path(__file__).resolve().parent / "resources" / "myco.db3"


def get_connection(path: str | Path | None = None) -> sqlite3.Connection:
    """Open the move database at ``path``, or at the default location."""
    return sqlite3.connect(database_path() if path is None else path)


@dataclass
class MovesEntry:
    """The moves recorded for one position hash."""

    hash_value: int
    moves: list[str] = field(default_factory=list)

    @staticmethod
    def create_tables(connection: sqlite3.Connection) -> None:
        """Create the moves table and its index if they do not exist."""
        try:
            connection.executescript(
                """
                CREATE TABLE IF NOT EXISTS moves (
                    hash INTEGER NOT NULL,
                    move TEXT NOT NULL,
                    UNIQUE (hash, move)
                );
                CREATE INDEX IF NOT EXISTS idx_moves_hash ON moves (hash);
                """
            )
        except sqlite3.Error as error:
            raise RuntimeError("failed to create moves table in sqlite") from error

    def insert(self, connection: sqlite3.Connection) -> None:
        """Record every move of this entry in one transaction, skipping duplicates."""
        key = _to_signed(self.hash_value)
        with connection:
            connection.executemany(
                "INSERT INTO moves (hash, move) VALUES (?, ?) "
                "ON CONFLICT (hash, move) DO NOTHING",
                [(key, move) for move in self.moves],
            )

    @classmethod
    def find_by_hash(
        cls, connection: sqlite3.Connection, hash_value: int
    ) -> MovesEntry | None:
        """Return the moves stored for ``hash_value``, or None if there are none."""
        rows = connection.execute(
            "SELECT move FROM moves WHERE hash = ?", (_to_signed(hash_value),)
        ).fetchall()
        if not rows:
            return None
        return cls(hash_value, [move for (move,) in rows])