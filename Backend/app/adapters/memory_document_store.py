"""
Mock Document Store Adapter

In-memory implementation of the document store.
Used in development and tests; mirrors the MongoDB adapter's semantics
(set-union appends, positional replace by id).
"""
import copy
from typing import Any, Dict, List, Optional

from app.adapters.document_store_interface import DocumentStoreInterface


class InMemoryDocumentStore(DocumentStoreInterface):
    """Mock adapter keeping documents in a dict"""

    def __init__(self, documents: Optional[Dict[str, Dict[str, Any]]] = None):
        self.documents: Dict[str, Dict[str, Any]] = copy.deepcopy(documents or {})

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        document = self.documents.get(key)
        return copy.deepcopy(document) if document is not None else None

    async def create(self, key: str, data: Dict[str, Any]) -> None:
        if key in self.documents:
            return
        self.documents[key] = copy.deepcopy(data)

    async def update(self, key: str, fields: Dict[str, Any]) -> None:
        # Matches an update_one with no upsert: missing document is a no-op
        document = self.documents.get(key)
        if document is None:
            return
        for field, value in fields.items():
            document[field] = copy.deepcopy(value)

    async def array_union(self, key: str, field: str, values: List[Dict[str, Any]]) -> None:
        document = self.documents.get(key)
        if document is None:
            return
        array = document.setdefault(field, [])
        for value in values:
            if value not in array:
                array.append(copy.deepcopy(value))

    async def replace_in_array(
        self,
        key: str,
        field: str,
        element_id: str,
        value: Dict[str, Any]
    ) -> bool:
        document = self.documents.get(key)
        if document is None:
            return False

        array = document.get(field) or []
        for index, element in enumerate(array):
            if element.get("id") == element_id:
                array[index] = copy.deepcopy(value)
                return True

        return False
