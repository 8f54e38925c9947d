"""
Unit tests for app.adapters.mongo_document_store.

UserRecord is replaced with a recording stand-in, so no MongoDB server is needed.
"""
import pytest
from typing import Any, Dict, List, Optional, Tuple

from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError
from pymongo.results import UpdateResult

from app.adapters import mongo_document_store
from app.adapters.mongo_document_store import MongoDocumentStore
from app.core.exceptions import StoreUnavailable


KEY = "user-1"


class RecordingUserRecord:
    """Stands in for the Beanie UserRecord and records every call"""

    documents: Dict[str, Dict[str, Any]] = {}
    updates: List[Tuple[Dict[str, Any], Dict[str, Any]]] = []
    inserted: List[Dict[str, Any]] = []
    error: Optional[Exception] = None
    matched = 1

    def __init__(self, id: str, **data):
        self.id = id
        self.data = data

    @classmethod
    def reset(cls):
        cls.documents = {}
        cls.updates = []
        cls.inserted = []
        cls.error = None
        cls.matched = 1

    @classmethod
    async def get(cls, key):
        if cls.error:
            raise cls.error
        data = cls.documents.get(key)
        return RecordingUserRecord(key, **data) if data is not None else None

    @classmethod
    def find_one(cls, query):
        return RecordingQuery(cls, query)

    def model_dump(self, exclude=None):
        assert "id" in exclude
        return dict(self.data)

    async def insert(self):
        if self.error:
            raise self.error
        self.inserted.append({"id": self.id, **self.data})
        return self


class RecordingQuery:
    def __init__(self, record_cls, query):
        self.record_cls = record_cls
        self.query = query

    async def update(self, update):
        if self.record_cls.error:
            raise self.record_cls.error
        self.record_cls.updates.append((self.query, update))
        return UpdateResult({"n": self.record_cls.matched, "nModified": self.record_cls.matched}, True)


@pytest.fixture
def records(monkeypatch):
    RecordingUserRecord.reset()
    monkeypatch.setattr(mongo_document_store, "UserRecord", RecordingUserRecord)
    return RecordingUserRecord


class TestMongoDocumentStore:
    """Test cases for the Beanie-backed document store"""

    @pytest.mark.asyncio
    async def test_get_returns_plain_document(self, records):
        records.documents[KEY] = {"displayName": "Sam", "vehicles": []}

        assert await MongoDocumentStore().get(KEY) == {"displayName": "Sam", "vehicles": []}

    @pytest.mark.asyncio
    async def test_get_missing(self, records):
        assert await MongoDocumentStore().get(KEY) is None

    @pytest.mark.asyncio
    async def test_transport_error_becomes_store_unavailable(self, records):
        records.error = ServerSelectionTimeoutError("no servers found")

        with pytest.raises(StoreUnavailable) as exc_info:
            await MongoDocumentStore().get(KEY)

        assert isinstance(exc_info.value.__cause__, ServerSelectionTimeoutError)

    @pytest.mark.asyncio
    async def test_write_transport_error_becomes_store_unavailable(self, records):
        records.error = ServerSelectionTimeoutError("no servers found")

        with pytest.raises(StoreUnavailable):
            await MongoDocumentStore().array_union(KEY, "vehicles", [{"id": "v1"}])

    @pytest.mark.asyncio
    async def test_create_inserts_keyed_document(self, records):
        await MongoDocumentStore().create(KEY, {"displayName": "Sam"})

        assert records.inserted == [{"id": KEY, "displayName": "Sam"}]

    @pytest.mark.asyncio
    async def test_create_existing_document_is_ignored(self, records):
        records.error = DuplicateKeyError("E11000 duplicate key error")

        # Concurrent bootstrap: the second insert loses quietly
        await MongoDocumentStore().create(KEY, {"displayName": "Sam"})

        assert records.inserted == []

    @pytest.mark.asyncio
    async def test_update_sets_only_given_fields(self, records):
        await MongoDocumentStore().update(KEY, {"mechanicEmail": "shop@example.com"})

        assert records.updates == [
            ({"_id": KEY}, {"$set": {"mechanicEmail": "shop@example.com"}})
        ]

    @pytest.mark.asyncio
    async def test_array_union_uses_add_to_set_each(self, records):
        values = [{"id": "v1"}, {"id": "v2"}]

        await MongoDocumentStore().array_union(KEY, "vehicles", values)

        assert records.updates == [
            ({"_id": KEY}, {"$addToSet": {"vehicles": {"$each": values}}})
        ]

    @pytest.mark.asyncio
    async def test_replace_in_array_uses_positional_set(self, records):
        value = {"id": "v1", "year": "2016", "make": "Honda", "model": "Civic"}

        replaced = await MongoDocumentStore().replace_in_array(KEY, "vehicles", "v1", value)

        assert replaced is True
        assert records.updates == [
            ({"_id": KEY, "vehicles.id": "v1"}, {"$set": {"vehicles.$": value}})
        ]

    @pytest.mark.asyncio
    async def test_replace_in_array_without_match(self, records):
        records.matched = 0

        replaced = await MongoDocumentStore().replace_in_array(KEY, "vehicles", "gone", {"id": "gone"})

        assert replaced is False
