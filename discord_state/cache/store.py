"""Thread-safe, id-keyed entity store.

One EntityCache exists per entity type. ``store()`` takes ownership of a
fully built entity and indexes it by its ``id``; a later store of the same
id replaces it outright (last write wins, no merging). There is no expiry
and no size bound.

Each cache guards its mapping with a lock, so a ``find()`` racing a
``store()`` from another shard's thread sees either the previous entity or
the new one, never a half-written record. Callers must finish building an
entity before storing it and must not mutate it afterwards.
"""

from __future__ import annotations

import logging
import threading
from typing import Generic, Iterator, Protocol, TypeVar

from discord_state.utils.snowflake import Snowflake

logger = logging.getLogger(__name__)


class HasId(Protocol):
    id: Snowflake


T = TypeVar("T", bound=HasId)


class EntityCache(Generic[T]):
    """Unbounded id -> entity registry for one entity type."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._items: dict[Snowflake, T] = {}
        self._lock = threading.RLock()

    def store(self, entity: T) -> Snowflake:
        """Insert or overwrite ``entity`` by id; returns the id as its handle."""
        key = Snowflake(entity.id)
        with self._lock:
            replaced = key in self._items
            self._items[key] = entity
        logger.debug(
            "%s cache: %s %s", self.name, "replaced" if replaced else "stored", key
        )
        return key

    def find(self, entity_id: int) -> T | None:
        with self._lock:
            return self._items.get(entity_id)

    def exists(self, entity_id: int) -> bool:
        with self._lock:
            return entity_id in self._items

    def ids(self) -> list[Snowflake]:
        with self._lock:
            return list(self._items)

    def clear(self) -> None:
        """Drop every entity; only used when the whole client shuts down."""
        with self._lock:
            self._items.clear()

    def __contains__(self, entity_id: object) -> bool:
        with self._lock:
            return entity_id in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        with self._lock:
            return iter(list(self._items.values()))

    def __repr__(self) -> str:
        return f"EntityCache(name={self.name!r}, size={len(self)})"
