"""
Video Index Service - Factory Pattern

Service that selects the appropriate video index adapter based on configuration.
Allows easy switching between mock and YouTube implementations.
"""
from app.adapters.video_index_interface import VideoIndexInterface
from app.adapters.video_mock_adapter import VideoMockAdapter
from app.core.config import settings


def get_video_index() -> VideoIndexInterface:
    """
    Factory function to get the appropriate video index adapter.

    Returns:
        Video index adapter instance based on configuration
    """
    adapter_type = settings.VIDEO_INDEX_ADAPTER_TYPE

    if adapter_type == "mock":
        return VideoMockAdapter()
    elif adapter_type == "youtube":
        from app.adapters.youtube_video_index import YouTubeVideoIndex
        return YouTubeVideoIndex()
    else:
        raise ValueError(f"Unknown video index adapter type: {adapter_type}")


# Singleton instance
video_index = get_video_index()
