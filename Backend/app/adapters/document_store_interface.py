"""
Document Store Adapter Interface

Abstract interface for the keyed document collection holding one record per user.
This allows easy switching between mock (in-memory) and real (MongoDB) implementations.

All primitives speak plain dicts in the stored (camelCase) field layout.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class DocumentStoreInterface(ABC):
    """Abstract interface for document store adapters"""

    @abstractmethod
    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the full document.

        Returns:
            Document fields or None if no document exists for the key
        """
        pass

    @abstractmethod
    async def create(self, key: str, data: Dict[str, Any]) -> None:
        """
        Create the full document.
        Creating a key that already exists leaves the existing document untouched.
        """
        pass

    @abstractmethod
    async def update(self, key: str, fields: Dict[str, Any]) -> None:
        """Partial update: overwrite the given top-level fields only."""
        pass

    @abstractmethod
    async def array_union(self, key: str, field: str, values: List[Dict[str, Any]]) -> None:
        """
        Set-union append to an array field without reading it first.
        Values already present (by full equality) are not added twice.
        """
        pass

    @abstractmethod
    async def replace_in_array(
        self,
        key: str,
        field: str,
        element_id: str,
        value: Dict[str, Any]
    ) -> bool:
        """
        Replace the array element whose `id` equals element_id, in one write.

        Returns:
            False if no element with that id exists
        """
        pass
