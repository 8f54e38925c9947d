"""
Mock Video Index Adapter

Mock implementation of the video index.
Returns hardcoded repair videos for common trouble codes.

Used in development when no YouTube API key is configured.
"""
from typing import Dict, List

from app.adapters.video_index_interface import VideoIndexInterface
from app.core.exceptions import InvalidQuery, VideoNotFound
from app.models.video import VideoSummary, VideoDetails


class VideoMockAdapter(VideoIndexInterface):
    """Mock adapter for video search"""

    # Hardcoded videos for common codes (first query token)
    VIDEO_DATABASE: Dict[str, List[Dict]] = {
        # Misfires
        "P0300": [
            {
                "id": "mock-p0300-1",
                "title": "P0300 Random Misfire - Causes and Fixes",
                "description": "Spark plugs, coils, vacuum leaks and injectors explained.",
                "channelTitle": "Mock Auto Repair",
                "publishedAt": "2021-03-14T12:00:00Z"
            },
            {
                "id": "mock-p0300-2",
                "title": "How to Diagnose a Misfire with a Scan Tool",
                "description": "Reading misfire counters and swapping coils.",
                "channelTitle": "Mock Garage",
                "publishedAt": "2020-08-02T09:30:00Z"
            }
        ],

        # Catalyst
        "P0420": [
            {
                "id": "mock-p0420-1",
                "title": "P0420 Catalyst Efficiency Below Threshold",
                "description": "Checking O2 sensors before replacing the converter.",
                "channelTitle": "Mock Auto Repair",
                "publishedAt": "2019-11-20T15:00:00Z"
            }
        ],

        # EVAP
        "P0455": [
            {
                "id": "mock-p0455-1",
                "title": "P0455 Large EVAP Leak - Gas Cap and Purge Valve",
                "description": "Smoke testing the EVAP system at home.",
                "channelTitle": "Mock Garage",
                "publishedAt": "2022-01-05T18:45:00Z"
            }
        ]
    }

    GENERIC_VIDEOS: List[Dict] = [
        {
            "id": "mock-generic-1",
            "title": "Check Engine Light Basics - Reading Trouble Codes",
            "description": "What an OBD-II code tells you and what it doesn't.",
            "channelTitle": "Mock Auto Repair",
            "publishedAt": "2018-06-10T10:00:00Z"
        }
    ]

    async def search(self, query: str, max_results: int) -> List[VideoSummary]:
        if not query or not query.strip():
            raise InvalidQuery("Search query cannot be empty")

        # build_search_query puts the trouble code first
        code = query.split()[0].upper()
        hits = self.VIDEO_DATABASE.get(code, []) + self.GENERIC_VIDEOS

        return [
            VideoSummary(thumbnail=f"https://img.example.com/{hit['id']}.jpg", **hit)
            for hit in hits[:max_results]
        ]

    async def get_video_details(self, video_id: str) -> VideoDetails:
        for hit in self._all_videos():
            if hit["id"] == video_id:
                return VideoDetails(
                    thumbnail=f"https://img.example.com/{hit['id']}.jpg",
                    viewCount=1000,
                    likeCount=50,
                    **hit
                )

        raise VideoNotFound(video_id)

    def _all_videos(self) -> List[Dict]:
        videos = list(self.GENERIC_VIDEOS)
        for hits in self.VIDEO_DATABASE.values():
            videos.extend(hits)
        return videos
