from pydantic import BaseModel, Field
from datetime import datetime
from typing import List
import uuid

from app.models.vehicle import VehicleSnapshot
from app.models.video import VideoResult


class SearchEntry(BaseModel):
    """
    Search History Entry model.
    One completed search, embedded in the user document's `searchHistory` array.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    vehicle: VehicleSnapshot
    code: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    results: List[VideoResult] = []

    @property
    def rated_count(self) -> int:
        return sum(1 for video in self.results if video.rated)
