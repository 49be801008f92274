import copy
import threading
from typing import Callable, Dict, List, Optional, Type, TypeVar

from fastapi import Request

from .models import Category, Comment, Post, User

T = TypeVar("T")

ENTITY_TYPES = (User, Post, Category, Comment)


class InMemoryStore:
    """Process-local stand-in for a database.

    Holds one insertion-ordered list per entity type and a per-type id
    counter. Every operation runs under the same lock for its whole
    duration, so a read never sees a half-applied write and id assignment
    is serialised. Counters are never rewound, so ids stay unique even
    after a deletion.

    Rows go in and come out as deep copies taken while the lock is held,
    so mutable fields such as ``Post.tags`` are never shared with callers.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: Dict[type, List] = {kind: [] for kind in ENTITY_TYPES}
        self._next_ids: Dict[type, int] = {kind: 1 for kind in ENTITY_TYPES}

    def _table(self, kind: type) -> List:
        try:
            return self._rows[kind]
        except KeyError:
            raise TypeError(f"{kind.__name__} is not stored here") from None

    def append(self, entity) -> int:
        """Assign the next id of the entity's type and store a copy of it.

        The caller keeps its own instance, with ``id`` filled in.
        """
        kind = type(entity)
        with self._lock:
            rows = self._table(kind)
            entity.id = self._next_ids[kind]
            self._next_ids[kind] += 1
            rows.append(copy.deepcopy(entity))
            return entity.id

    def find(self, kind: Type[T], predicate: Callable[[T], bool]) -> Optional[T]:
        with self._lock:
            for row in self._table(kind):
                if predicate(row):
                    return copy.deepcopy(row)
        return None

    def get(self, kind: Type[T], entity_id: int) -> Optional[T]:
        return self.find(kind, lambda row: row.id == entity_id)

    def filter(
        self, kind: Type[T], predicate: Optional[Callable[[T], bool]] = None
    ) -> List[T]:
        with self._lock:
            return [
                copy.deepcopy(row)
                for row in self._table(kind)
                if predicate is None or predicate(row)
            ]

    def update(
        self, kind: Type[T], entity_id: int, mutator: Callable[[T], None]
    ) -> Optional[T]:
        """Apply ``mutator`` in place to the row with ``entity_id``.

        Returns a copy of the updated row, or None if no row matched.
        """
        with self._lock:
            for row in self._table(kind):
                if row.id == entity_id:
                    mutator(row)
                    return copy.deepcopy(row)
        return None

    def remove(self, kind: type, entity_id: int) -> bool:
        with self._lock:
            rows = self._table(kind)
            for index, row in enumerate(rows):
                if row.id == entity_id:
                    del rows[index]
                    return True
        return False

    def count(self, kind: type) -> int:
        with self._lock:
            return len(self._table(kind))


def get_store(request: Request) -> InMemoryStore:
    """Return the store owned by the running application."""
    return request.app.state.store
