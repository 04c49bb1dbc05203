from __future__ import annotations

import hashlib
import json
from typing import Any


def make_key(inputs: dict) -> str:
    normalized = json.dumps(inputs, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


class DerivedCache:
    """
    Memo for values derived purely from their inputs.

    Entries never expire; callers ``clear()`` when an input outside the key
    (the catalog) is replaced.
    """

    def __init__(self, max_entries: int = 64) -> None:
        self._entries: dict[str, Any] = {}
        self._max_entries = max_entries
        self.hits = 0
        self.misses = 0

    def get(self, inputs: dict) -> Any | None:
        key = make_key(inputs)
        if key in self._entries:
            self.hits += 1
            return self._entries[key]
        self.misses += 1
        return None

    def set(self, inputs: dict, value: Any) -> None:
        if len(self._entries) >= self._max_entries:
            # drop the oldest entry
            self._entries.pop(next(iter(self._entries)))
        self._entries[make_key(inputs)] = value

    def stats(self) -> dict:
        total = self.hits + self.misses
        return {
            "size": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": round(self.hits / total * 100, 1) if total > 0 else 0.0,
        }

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
