"""
YouTube Video Index Adapter - YouTube Data API v3

Searches repair videos through the YouTube Data API.

API Documentation: https://developers.google.com/youtube/v3/docs/search/list

IMPORTANT: Failures are raised as typed errors - NO RETRY, NO FALLBACK DATA.
Quota exhaustion (403/429) is reported separately from other failures so the
frontend can show a "try again tomorrow" message.
"""
import logging
from typing import Dict, List, Optional

import httpx

from app.adapters.video_index_interface import VideoIndexInterface
from app.core.config import settings
from app.core.exceptions import InvalidQuery, QuotaExceeded, UpstreamError, VideoNotFound
from app.models.video import VideoSummary, VideoDetails


logger = logging.getLogger(__name__)

QUOTA_STATUS_CODES = (403, 429)


def _pick_thumbnail(thumbnails: Dict, sizes=("medium", "default")) -> Optional[str]:
    for size in sizes:
        url = (thumbnails.get(size) or {}).get("url")
        if url:
            return url
    return None


def _to_int(value) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class YouTubeVideoIndex(VideoIndexInterface):
    """Video index adapter for the YouTube Data API"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key if api_key is not None else settings.YOUTUBE_API_KEY
        self.base_url = base_url or settings.YOUTUBE_API_BASE_URL
        self.timeout = timeout or settings.VIDEO_SEARCH_TIMEOUT
        self.relevance_language = settings.YOUTUBE_RELEVANCE_LANGUAGE
        self.transport = transport

    def _has_valid_key(self) -> bool:
        return isinstance(self.api_key, str) and len(self.api_key) > 10

    async def _get(self, endpoint: str, params: Dict) -> Dict:
        """Make request to YouTube API and map failures to typed errors"""
        if not self._has_valid_key():
            logger.error("YouTube API key is missing or invalid")
            raise UpstreamError("Invalid YouTube API key. Please check your configuration.")

        url = f"{self.base_url}{endpoint}"
        params = {**params, "key": self.api_key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout calling YouTube API: {endpoint}")
            raise UpstreamError("YouTube API timeout") from e
        except httpx.HTTPError as e:
            logger.error(f"Cannot reach YouTube API at {url}: {e}")
            raise UpstreamError(f"YouTube API not available: {e}") from e

        if response.status_code in QUOTA_STATUS_CODES:
            logger.error(f"YouTube API quota exceeded ({response.status_code})")
            raise QuotaExceeded()

        if response.status_code == 400:
            logger.error(f"YouTube API rejected request: {response.text[:200]}")
            raise InvalidQuery("Invalid request to YouTube API. Please check your search parameters.")

        if response.status_code >= 400:
            logger.error(f"YouTube API error {response.status_code}: {response.text[:200]}")
            raise UpstreamError(f"YouTube API error {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Invalid response from YouTube API") from e

        if not isinstance(data, dict) or not isinstance(data.get("items"), list):
            logger.error(f"Invalid YouTube API response: {str(data)[:200]}")
            raise UpstreamError("Invalid response from YouTube API")

        return data

    async def search(self, query: str, max_results: int) -> List[VideoSummary]:
        if not query or not query.strip():
            raise InvalidQuery("Search query cannot be empty")

        logger.info(f"YouTube search: q='{query}' maxResults={max_results}")

        data = await self._get("/search", {
            "part": "snippet",
            "maxResults": max_results,
            "q": query,
            "type": "video",
            "relevanceLanguage": self.relevance_language
        })

        videos = [self._parse_search_item(item) for item in data["items"]]
        videos = [video for video in videos if video is not None]

        logger.info(f"Found {len(videos)} videos for query: '{query}'")
        return videos

    async def get_video_details(self, video_id: str) -> VideoDetails:
        if not video_id or not video_id.strip():
            raise InvalidQuery("Video ID cannot be empty")

        data = await self._get("/videos", {
            "part": "snippet,statistics",
            "id": video_id
        })

        if not data["items"]:
            raise VideoNotFound(video_id)

        item = data["items"][0]
        snippet = item.get("snippet", {})
        statistics = item.get("statistics", {})

        return VideoDetails(
            id=item.get("id", video_id),
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            thumbnail=_pick_thumbnail(snippet.get("thumbnails", {}), ("high", "medium", "default")),
            channelTitle=snippet.get("channelTitle", ""),
            publishedAt=snippet.get("publishedAt"),
            viewCount=_to_int(statistics.get("viewCount")),
            likeCount=_to_int(statistics.get("likeCount"))
        )

    def _parse_search_item(self, item: Dict) -> Optional[VideoSummary]:
        """
        Parse one search hit.

        YouTube returns hits in format:
        {
            "id": {"kind": "youtube#video", "videoId": "..."},
            "snippet": {"title": ..., "thumbnails": {"medium": {"url": ...}}, ...}
        }
        """
        video_id = (item.get("id") or {}).get("videoId")
        if not video_id:
            # Channels/playlists slip through occasionally
            return None

        snippet = item.get("snippet", {})
        return VideoSummary(
            id=video_id,
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            thumbnail=_pick_thumbnail(snippet.get("thumbnails", {})),
            channelTitle=snippet.get("channelTitle", ""),
            publishedAt=snippet.get("publishedAt")
        )
