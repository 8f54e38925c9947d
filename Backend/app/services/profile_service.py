"""
Profile Service - User Document Owner

Owns the single per-user document:
- Lazily creates it (empty collections, empty contact fields) on first access
- Reads it as a UserDocument
- Partial updates of top-level scalar fields

Vehicle and search history managers build on ensure_document()/load() so a
mutation never fails because the document does not exist yet.
"""
import logging
from typing import Optional

from app.adapters.document_store_interface import DocumentStoreInterface
from app.core.dependencies import require_user_id
from app.models.user import UserDocument
from app.services.store_service import document_store


logger = logging.getLogger(__name__)


class ProfileStore:
    """Service for the per-user document (Async)"""

    def __init__(self, store: DocumentStoreInterface):
        self.store = store

    async def ensure_document(
        self,
        user_id: str,
        display_name: str = "",
        email: str = ""
    ) -> str:
        """
        Make sure the user's document exists. Idempotent.

        Returns:
            Document key (the user identifier)
        """
        user_id = require_user_id(user_id)

        if await self.store.get(user_id) is None:
            document = UserDocument.empty(display_name, email)
            await self.store.create(user_id, document.model_dump())
            logger.info(f"Created user document for {user_id}")

        return user_id

    async def load(self, user_id: str) -> UserDocument:
        """Read the user's document, creating it first if absent."""
        user_id = require_user_id(user_id)

        data = await self.store.get(user_id)
        if data is None:
            await self.ensure_document(user_id)
            # Re-read: a concurrent bootstrap from another session wins
            data = await self.store.get(user_id)

        if data is None:
            return UserDocument.empty()

        return UserDocument.model_validate(data)

    async def get_profile(self, user_id: Optional[str]) -> Optional[UserDocument]:
        """
        Get the user's profile.

        Returns:
            None only when there is no authenticated user
        """
        if not user_id or not str(user_id).strip():
            return None

        return await self.load(user_id)

    async def update_mechanic_email(self, user_id: str, email: str) -> None:
        """Set the mechanic contact address."""
        user_id = await self.ensure_document(user_id)
        await self.store.update(user_id, {"mechanicEmail": (email or "").strip()})
        logger.info(f"Updated mechanic email for {user_id}")

    async def update_display_name(self, user_id: str, display_name: str) -> None:
        user_id = await self.ensure_document(user_id)
        await self.store.update(user_id, {"displayName": (display_name or "").strip()})


def get_profile_store() -> ProfileStore:
    """Dependency for getting the profile store."""
    return ProfileStore(document_store)
