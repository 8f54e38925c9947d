"""
Video Index Adapter Interface

Abstract interface for external video search services.
This allows easy switching between mock and real implementations (YouTube).
"""
from abc import ABC, abstractmethod
from typing import List

from app.models.video import VideoSummary, VideoDetails


class VideoIndexInterface(ABC):
    """Abstract interface for video index adapters"""

    @abstractmethod
    async def search(self, query: str, max_results: int) -> List[VideoSummary]:
        """
        Search videos by free-text query.

        Args:
            query: Search text
            max_results: Result cap

        Returns:
            Ranked video summaries (possibly empty)

        Raises:
            InvalidQuery: Empty query or rejected request
            QuotaExceeded: Upstream quota / rate limit exhausted
            UpstreamError: Any other upstream failure
        """
        pass

    @abstractmethod
    async def get_video_details(self, video_id: str) -> VideoDetails:
        """
        Get a single video with statistics.

        Raises:
            VideoNotFound: Unknown video id
        """
        pass
