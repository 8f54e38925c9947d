"""
MongoDB Document Store Adapter

Stores each user document in the `users` collection through Beanie
(UserRecord, _id = user identifier). Requires init_db() to have run.

IMPORTANT: Transport errors are raised as StoreUnavailable - NO RETRY.
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from pymongo.errors import DuplicateKeyError, PyMongoError

from app.adapters.document_store_interface import DocumentStoreInterface
from app.core.exceptions import StoreUnavailable
from app.models.user import UserRecord


logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str, key: str):
    try:
        yield
    except DuplicateKeyError:
        raise
    except PyMongoError as e:
        logger.error(f"MongoDB {operation} failed for user {key}: {e}")
        raise StoreUnavailable(f"Document store {operation} failed: {e}") from e


class MongoDocumentStore(DocumentStoreInterface):
    """Document store backed by MongoDB (Motor + Beanie)"""

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        with _store_errors("read", key):
            record = await UserRecord.get(key)

        if record is None:
            return None

        return record.model_dump(exclude={"id", "revision_id"})

    async def create(self, key: str, data: Dict[str, Any]) -> None:
        try:
            with _store_errors("create", key):
                await UserRecord(id=key, **data).insert()
        except DuplicateKeyError:
            # Another session bootstrapped the same user first
            logger.info(f"User document {key} already exists, keeping it")

    async def update(self, key: str, fields: Dict[str, Any]) -> None:
        with _store_errors("update", key):
            await UserRecord.find_one({"_id": key}).update({"$set": fields})

    async def array_union(self, key: str, field: str, values: List[Dict[str, Any]]) -> None:
        with _store_errors("append", key):
            await UserRecord.find_one({"_id": key}).update(
                {"$addToSet": {field: {"$each": values}}}
            )

    async def replace_in_array(
        self,
        key: str,
        field: str,
        element_id: str,
        value: Dict[str, Any]
    ) -> bool:
        # Positional operator: the filter pins the matched element
        with _store_errors("replace", key):
            result = await UserRecord.find_one(
                {"_id": key, f"{field}.id": element_id}
            ).update({"$set": {f"{field}.$": value}})

        return bool(result and result.matched_count)
