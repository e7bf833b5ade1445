"""In-memory tables backing the repositories."""

import threading
from datetime import datetime
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

import pendulum
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock."""
    return pendulum.now("UTC")


class MemoryTable(Generic[T]):
    """
    Id-keyed record mapping with its own monotonic id counter.

    Ids start at 1 and are never handed out twice, even after a delete.
    Records are stored and returned as copies so callers cannot reach
    stored state except through the owning repository.
    """

    def __init__(self, name: str) -> None:
        """Initialize an empty table."""
        self.name = name
        self.lock = threading.RLock()
        self._rows: Dict[int, T] = {}
        self._next_id = 1

    def __len__(self) -> int:
        """Number of stored records."""
        return len(self._rows)

    def next_id(self) -> int:
        """Reserve the next id. Callers must hold the lock."""
        row_id = self._next_id
        self._next_id += 1
        return row_id

    def put(self, row: T) -> T:
        """Store a record under its id and return a copy."""
        with self.lock:
            self._rows[row.id] = row
            return row.model_copy(deep=True)

    def get(self, row_id: int) -> Optional[T]:
        """Return a copy of the record, or None."""
        with self.lock:
            row = self._rows.get(row_id)
            return row.model_copy(deep=True) if row is not None else None

    def peek(self, row_id: int) -> Optional[T]:
        """Return the stored record itself. Callers must hold the lock."""
        return self._rows.get(row_id)

    def remove(self, row_id: int) -> bool:
        """Drop a record, reporting whether it was present."""
        with self.lock:
            return self._rows.pop(row_id, None) is not None

    def scan(self) -> Iterator[T]:
        """Iterate stored records in ascending id order. Callers must hold the lock."""
        for row_id in sorted(self._rows):
            yield self._rows[row_id]

    def select(self, predicate: Optional[Callable[[T], bool]] = None) -> List[T]:
        """Copies of all records matching predicate, ascending id order."""
        with self.lock:
            return [
                row.model_copy(deep=True)
                for row in self.scan()
                if predicate is None or predicate(row)
            ]
