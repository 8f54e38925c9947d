from pydantic import BaseModel
from typing import Optional


class VideoSummary(BaseModel):
    """Normalized hit returned by a video index"""
    id: str
    title: str = ""
    description: str = ""
    thumbnail: Optional[str] = None
    channelTitle: str = ""
    publishedAt: Optional[str] = None


class VideoResult(VideoSummary):
    """
    Video Result model.
    Embedded in a SearchEntry. `rated` only ever moves from False to True.
    """
    rated: bool = False
    isHelpful: Optional[bool] = None


class VideoDetails(VideoSummary):
    """Single video with statistics"""
    viewCount: Optional[int] = None
    likeCount: Optional[int] = None
