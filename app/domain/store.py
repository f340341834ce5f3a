from __future__ import annotations

import random
import threading
from typing import Optional
from uuid import uuid4

from .coaster import Coaster

__all__ = [
    "CoasterStore",
    "new_coaster_id",
]


def new_coaster_id() -> str:
    """Return a fresh, collision-resistant coaster identifier."""
    return uuid4().hex


class CoasterStore:
    """In-memory mapping of coaster id -> Coaster guarded by a single lock.

    Every public method holds the lock for the duration of the map access only.
    Records are copied on the way in and out so callers never share a mutable
    instance with the store.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._coasters: dict[str, Coaster] = {}
        self._lock = threading.Lock()
        self._rng = rng or random.Random()

    def insert(self, coaster: Coaster) -> str:
        """Assign a new id to a copy of `coaster`, store it, and return the id."""
        with self._lock:
            coaster_id = new_coaster_id()
            while coaster_id in self._coasters:
                coaster_id = new_coaster_id()
            self._coasters[coaster_id] = coaster.model_copy(update={"id": coaster_id})
        return coaster_id

    def list(self) -> list[Coaster]:
        """Return a snapshot of all records in no particular order."""
        with self._lock:
            records = list(self._coasters.values())
        return [r.model_copy() for r in records]

    def get(self, coaster_id: str) -> Optional[Coaster]:
        with self._lock:
            record = self._coasters.get(coaster_id)
        return record.model_copy() if record is not None else None

    def random_id(self) -> Optional[str]:
        """Pick an id uniformly among the stored records, or None when empty."""
        with self._lock:
            if not self._coasters:
                return None
            ids = list(self._coasters)
            if len(ids) == 1:
                return ids[0]
            return self._rng.choice(ids)

    def __len__(self) -> int:
        with self._lock:
            return len(self._coasters)
