"""
Unit tests for app.adapters.video_mock_adapter.
"""
import pytest

from app.adapters.video_mock_adapter import VideoMockAdapter
from app.core.exceptions import InvalidQuery, VideoNotFound
from app.services.search_service import build_search_query


class TestVideoMockAdapter:
    """Test cases for the development video index"""

    @pytest.mark.asyncio
    async def test_search_looks_up_code_from_built_query(self):
        query = build_search_query("Honda", "Civic", "2015", "p0300")

        hits = await VideoMockAdapter().search(query, 15)

        assert [hit.id for hit in hits] == ["mock-p0300-1", "mock-p0300-2", "mock-generic-1"]

    @pytest.mark.asyncio
    async def test_search_respects_max_results(self):
        query = build_search_query("Honda", "Civic", "", "P0300")

        hits = await VideoMockAdapter().search(query, 1)

        assert [hit.id for hit in hits] == ["mock-p0300-1"]

    @pytest.mark.asyncio
    async def test_unknown_code_returns_generic_videos(self):
        hits = await VideoMockAdapter().search("P9999 2015 Honda Civic repair", 15)

        assert [hit.id for hit in hits] == ["mock-generic-1"]

    @pytest.mark.asyncio
    async def test_empty_query(self):
        with pytest.raises(InvalidQuery):
            await VideoMockAdapter().search("   ", 15)

    @pytest.mark.asyncio
    async def test_get_video_details(self):
        details = await VideoMockAdapter().get_video_details("mock-p0420-1")

        assert details.title.startswith("P0420")
        assert details.viewCount == 1000

    @pytest.mark.asyncio
    async def test_get_video_details_unknown(self):
        with pytest.raises(VideoNotFound):
            await VideoMockAdapter().get_video_details("missing")
