import asyncio

import pytest

from user_registry_api.app.core.cache import InMemoryObjectCache


def test_add_get_and_get_all():
    async def scenario():
        cache = InMemoryObjectCache()
        await cache.add("a", 1)
        await cache.add("b", 2)
        assert await cache.get("a") == 1
        assert await cache.get("missing") is None
        assert sorted(await cache.get_all()) == [1, 2]
        assert len(cache) == 2

    asyncio.run(scenario())


def test_get_all_returns_a_snapshot():
    async def scenario():
        cache = InMemoryObjectCache()
        await cache.add("a", 1)
        snapshot = await cache.get_all()
        await cache.add("b", 2)
        assert snapshot == [1]

    asyncio.run(scenario())


def test_add_refuses_existing_key():
    async def scenario():
        cache = InMemoryObjectCache()
        await cache.add("a", 1)
        with pytest.raises(KeyError):
            await cache.add("a", 2)
        assert await cache.get("a") == 1

    asyncio.run(scenario())


def test_update_replaces_existing_value():
    async def scenario():
        cache = InMemoryObjectCache()
        await cache.add("a", 1)
        await cache.update("a", 5)
        assert await cache.get("a") == 5
        with pytest.raises(KeyError):
            await cache.update("missing", 1)

    asyncio.run(scenario())


def test_delete_is_idempotent():
    async def scenario():
        cache = InMemoryObjectCache()
        await cache.add("a", 1)
        await cache.delete("a")
        await cache.delete("a")
        await cache.delete("never-there")
        assert await cache.get_all() == []

    asyncio.run(scenario())
