"""Thread-safe cache of position evaluations keyed by Zobrist hash."""

from __future__ import annotations

import threading


class EvaluationCache:
    """Maps Zobrist hashes to evaluations, safe to share between threads."""

    def __init__(self) -> None:
        self._values: dict[int, int] = {}
        self._lock = threading.Lock()

    def get(self, zobrist: int) -> int | None:
        """Return the cached evaluation, or None when the hash is unknown."""
        with self._lock:
            return self._values.get(zobrist)

    def insert(self, zobrist: int, value: int) -> None:
        """Store or replace the evaluation for ``zobrist``."""
        with self._lock:
            self._values[zobrist] = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)


EVALUATION_CACHE = EvaluationCache()