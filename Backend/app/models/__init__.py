"""
Database models package.
Import all models here for Beanie registration.
"""
from app.models.user import UserDocument, UserRecord
from app.models.vehicle import Vehicle, VehicleSnapshot
from app.models.search_entry import SearchEntry
from app.models.video import VideoSummary, VideoResult, VideoDetails

__all__ = [
    "UserDocument",
    "UserRecord",
    "Vehicle",
    "VehicleSnapshot",
    "SearchEntry",
    "VideoSummary",
    "VideoResult",
    "VideoDetails",
]
