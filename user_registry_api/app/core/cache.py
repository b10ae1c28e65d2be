"""
In-memory object cache used as the record store.

``ObjectCache`` is the contract the service layer depends on; it is a
structural protocol so a persistent implementation can be dropped in
later without touching the services or the validator.  All methods
are coroutines because real stores perform I/O.

``InMemoryObjectCache`` keeps records in a dictionary for the lifetime
of the process.  The instance is created by ``create_app`` and
attached to ``app.state``; routes obtain it through the
``get_user_cache`` dependency.
"""

import asyncio
import logging
from typing import Dict, Generic, Hashable, List, Optional, Protocol, TypeVar

from fastapi import Request

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger(__name__)


class ObjectCache(Protocol[K, V]):
    """Contract for an associative record store."""

    async def get_all(self) -> List[V]: ...

    async def get(self, key: K) -> Optional[V]: ...

    async def add(self, key: K, value: V) -> None: ...

    async def update(self, key: K, value: V) -> None: ...

    async def delete(self, key: K) -> None: ...


class InMemoryObjectCache(Generic[K, V]):
    """Dictionary-backed ``ObjectCache``.

    Each operation holds an ``asyncio.Lock`` so the dictionary is never
    observed mid-update.  This does not make check-then-write sequences
    performed by callers atomic.
    """

    def __init__(self) -> None:
        self._items: Dict[K, V] = {}
        self._lock = asyncio.Lock()

    async def get_all(self) -> List[V]:
        async with self._lock:
            return list(self._items.values())

    async def get(self, key: K) -> Optional[V]:
        async with self._lock:
            return self._items.get(key)

    async def add(self, key: K, value: V) -> None:
        async with self._lock:
            if key in self._items:
                raise KeyError(f"key {key} already exists")
            self._items[key] = value
        logger.debug("Cached %s", key)

    async def update(self, key: K, value: V) -> None:
        async with self._lock:
            if key not in self._items:
                raise KeyError(f"key {key} does not exist")
            self._items[key] = value

    async def delete(self, key: K) -> None:
        async with self._lock:
            self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


def get_user_cache(request: Request) -> ObjectCache:
    """FastAPI dependency returning the cache bound to the running app."""
    return request.app.state.user_cache
