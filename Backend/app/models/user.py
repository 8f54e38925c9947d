from beanie import Document
from pydantic import BaseModel, Field
from datetime import datetime
from typing import List

from app.models.vehicle import Vehicle
from app.models.search_entry import SearchEntry


class UserDocument(BaseModel):
    """
    User Document model.
    The single per-user record holding profile scalars and every embedded
    collection. Keyed by user identifier in the document store.
    """
    displayName: str = ""
    email: str = ""
    mechanicEmail: str = ""
    createdAt: datetime = Field(default_factory=datetime.utcnow)

    vehicles: List[Vehicle] = []
    searchHistory: List[SearchEntry] = []

    @classmethod
    def empty(cls, display_name: str = "", email: str = "") -> "UserDocument":
        return cls(displayName=display_name or "", email=email or "")


class UserRecord(Document):
    """
    MongoDB mapping of UserDocument (`users` collection, _id = user id).
    Only the Mongo document store adapter touches this class.
    """
    id: str
    displayName: str = ""
    email: str = ""
    mechanicEmail: str = ""
    createdAt: datetime = Field(default_factory=datetime.utcnow)

    vehicles: List[Vehicle] = []
    searchHistory: List[SearchEntry] = []

    class Settings:
        name = "users"
