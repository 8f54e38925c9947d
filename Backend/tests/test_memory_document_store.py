"""
Unit tests for app.adapters.memory_document_store.
"""
import pytest

from app.adapters.memory_document_store import InMemoryDocumentStore


KEY = "user-1"


class TestInMemoryDocumentStore:
    """Test cases for the mock document store primitives."""

    @pytest.mark.asyncio
    async def test_get_missing(self):
        assert await InMemoryDocumentStore().get(KEY) is None

    @pytest.mark.asyncio
    async def test_create_does_not_overwrite(self):
        store = InMemoryDocumentStore()
        await store.create(KEY, {"displayName": "first"})
        await store.create(KEY, {"displayName": "second"})

        assert (await store.get(KEY))["displayName"] == "first"

    @pytest.mark.asyncio
    async def test_returns_copies(self):
        store = InMemoryDocumentStore({KEY: {"vehicles": [{"id": "v1"}]}})

        document = await store.get(KEY)
        document["vehicles"].append({"id": "v2"})

        assert (await store.get(KEY))["vehicles"] == [{"id": "v1"}]

    @pytest.mark.asyncio
    async def test_array_union_is_a_set_union(self):
        store = InMemoryDocumentStore({KEY: {"vehicles": [{"id": "v1"}]}})

        await store.array_union(KEY, "vehicles", [{"id": "v1"}, {"id": "v2"}])
        await store.array_union(KEY, "vehicles", [{"id": "v2"}])

        assert (await store.get(KEY))["vehicles"] == [{"id": "v1"}, {"id": "v2"}]

    @pytest.mark.asyncio
    async def test_update_is_partial(self):
        store = InMemoryDocumentStore({KEY: {"mechanicEmail": "", "vehicles": [{"id": "v1"}]}})

        await store.update(KEY, {"mechanicEmail": "shop@example.com"})

        document = await store.get(KEY)
        assert document["mechanicEmail"] == "shop@example.com"
        assert document["vehicles"] == [{"id": "v1"}]

    @pytest.mark.asyncio
    async def test_writes_to_missing_document_are_ignored(self):
        store = InMemoryDocumentStore()

        await store.update(KEY, {"mechanicEmail": "x"})
        await store.array_union(KEY, "vehicles", [{"id": "v1"}])

        assert await store.get(KEY) is None
        assert await store.replace_in_array(KEY, "vehicles", "v1", {"id": "v1"}) is False

    @pytest.mark.asyncio
    async def test_replace_in_array(self):
        store = InMemoryDocumentStore({KEY: {"vehicles": [{"id": "v1", "make": "Honda"}, {"id": "v2", "make": "Ford"}]}})

        assert await store.replace_in_array(KEY, "vehicles", "v2", {"id": "v2", "make": "Mazda"}) is True
        assert await store.replace_in_array(KEY, "vehicles", "v9", {"id": "v9"}) is False

        assert (await store.get(KEY))["vehicles"] == [
            {"id": "v1", "make": "Honda"},
            {"id": "v2", "make": "Mazda"}
        ]
