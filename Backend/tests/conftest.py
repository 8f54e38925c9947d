"""
Shared fixtures: in-memory document store, managers and a scripted video index.
"""
import os

# Must be set before app.core.config is imported
os.environ.setdefault("STORE_ADAPTER_TYPE", "mock")
os.environ.setdefault("VIDEO_INDEX_ADAPTER_TYPE", "mock")

import pytest
from typing import List, Optional

from app.adapters.memory_document_store import InMemoryDocumentStore
from app.adapters.video_index_interface import VideoIndexInterface
from app.core.exceptions import VideoNotFound
from app.models.video import VideoSummary, VideoDetails
from app.services.profile_service import ProfileStore
from app.services.vehicle_service import VehicleManager
from app.services.search_history_service import SearchHistoryManager
from app.services.search_service import SearchService


USER_ID = "user-123"


def make_hits(*video_ids: str) -> List[VideoSummary]:
    return [
        VideoSummary(
            id=video_id,
            title=f"Video {video_id}",
            description="Repair walkthrough",
            thumbnail=f"https://img.example.com/{video_id}.jpg",
            channelTitle="Test Channel",
            publishedAt="2021-01-01T00:00:00Z"
        )
        for video_id in video_ids
    ]


class ScriptedVideoIndex(VideoIndexInterface):
    """Video index returning fixed hits (or raising a fixed error) and recording calls"""

    def __init__(self, hits: Optional[List[VideoSummary]] = None, error: Optional[Exception] = None):
        self.hits = hits if hits is not None else make_hits("vid-a", "vid-b", "vid-c")
        self.error = error
        self.calls = []

    async def search(self, query: str, max_results: int) -> List[VideoSummary]:
        self.calls.append((query, max_results))
        if self.error is not None:
            raise self.error
        return list(self.hits[:max_results])

    async def get_video_details(self, video_id: str) -> VideoDetails:
        for hit in self.hits:
            if hit.id == video_id:
                return VideoDetails(**hit.model_dump(), viewCount=10, likeCount=2)
        raise VideoNotFound(video_id)


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def profiles(store):
    return ProfileStore(store)


@pytest.fixture
def vehicles(profiles):
    return VehicleManager(profiles)


@pytest.fixture
def history(profiles):
    return SearchHistoryManager(profiles)


@pytest.fixture
def video_index():
    return ScriptedVideoIndex()


@pytest.fixture
def search_service(video_index, history):
    return SearchService(video_index, history, max_results=15)
