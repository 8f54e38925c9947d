"""
Document Store Service - Factory Pattern

Service that selects the appropriate document store adapter based on configuration.
Allows easy switching between mock (in-memory) and MongoDB implementations.
"""
from app.adapters.document_store_interface import DocumentStoreInterface
from app.adapters.memory_document_store import InMemoryDocumentStore
from app.core.config import settings


def get_document_store() -> DocumentStoreInterface:
    """
    Factory function to get the appropriate document store adapter.

    Returns:
        Document store instance based on configuration
    """
    adapter_type = settings.STORE_ADAPTER_TYPE

    if adapter_type == "mock":
        return InMemoryDocumentStore()
    elif adapter_type == "mongo":
        from app.adapters.mongo_document_store import MongoDocumentStore
        return MongoDocumentStore()
    else:
        raise ValueError(f"Unknown document store adapter type: {adapter_type}")


# Singleton instance
document_store = get_document_store()
