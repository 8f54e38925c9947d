"""
Search Service - Repair Video Search Orchestration

Coordinates between:
- Video Index adapter (YouTube / mock) for the actual search
- Search History Manager for persisting completed searches

Flow: normalize inputs -> build query -> search -> annotate -> save.
Search and save are not transactional: if saving fails after a successful
search, nothing is cached and the caller re-runs the whole search.
"""
import logging
from typing import List, Optional, Union

from app.adapters.video_index_interface import VideoIndexInterface
from app.core.config import settings
from app.core.dependencies import require_user_id
from app.core.exceptions import InvalidQuery
from app.models.search_entry import SearchEntry
from app.models.vehicle import VehicleSnapshot
from app.models.video import VideoResult, VideoDetails
from app.services.search_history_service import SearchHistoryManager, get_search_history_manager
from app.services.video_service import video_index


logger = logging.getLogger(__name__)


def build_search_query(
    make: str,
    model: str,
    year: Union[str, int, None],
    code: str
) -> str:
    """
    Build the free-text query: "<CODE> <YEAR> <MAKE> <MODEL> repair".

    Raises:
        InvalidQuery: Code, make or model empty after trimming
    """
    normalized_make = (make or "").strip()
    normalized_model = (model or "").strip()
    normalized_year = str(year).strip() if year is not None else ""
    normalized_code = (code or "").strip().upper()

    if not normalized_code:
        raise InvalidQuery("Diagnostic trouble code is required")
    if not normalized_make or not normalized_model:
        raise InvalidQuery("Vehicle make and model are required")

    tokens = [normalized_code, normalized_year, normalized_make, normalized_model, "repair"]
    return " ".join(token for token in tokens if token)


class SearchService:
    """Service for repair video search (Async)"""

    def __init__(
        self,
        videos: VideoIndexInterface,
        history: SearchHistoryManager,
        max_results: Optional[int] = None
    ):
        self.videos = videos
        self.history = history
        self.max_results = max_results or settings.VIDEO_SEARCH_MAX_RESULTS

    async def search_repair_videos(
        self,
        make: str,
        model: str,
        year: Union[str, int, None],
        code: str
    ) -> List[VideoResult]:
        """
        Search repair videos for a vehicle and trouble code.

        Returns:
            Results marked unrated (rated=False, isHelpful=None)

        Raises:
            InvalidQuery, QuotaExceeded, UpstreamError
        """
        query = build_search_query(make, model, year, code)
        logger.info(f"Searching with query: {query}")

        hits = await self.videos.search(query, self.max_results)

        return [
            VideoResult(**hit.model_dump(), rated=False, isHelpful=None)
            for hit in hits
        ]

    async def search_and_save(
        self,
        user_id: str,
        vehicle: VehicleSnapshot,
        code: str
    ) -> SearchEntry:
        """
        Search, then append the search to the user's history.

        Returns:
            The stored history entry
        """
        # Fail before spending quota on a search that cannot be saved
        user_id = require_user_id(user_id)

        results = await self.search_repair_videos(vehicle.make, vehicle.model, vehicle.year, code)

        return await self.history.add(user_id, vehicle, code, results)

    async def get_video_details(self, video_id: str) -> VideoDetails:
        return await self.videos.get_video_details(video_id)


def get_search_service() -> SearchService:
    """Dependency for getting the search service."""
    return SearchService(video_index, get_search_history_manager())
