"""
Unit tests for app.services.search_service.
"""
import pytest

from app.adapters.memory_document_store import InMemoryDocumentStore
from app.core.exceptions import (
    InvalidQuery,
    NotAuthenticated,
    QuotaExceeded,
    StoreUnavailable,
    UpstreamError
)
from app.models.vehicle import VehicleSnapshot
from app.services.profile_service import ProfileStore
from app.services.search_history_service import SearchHistoryManager
from app.services.search_service import SearchService, build_search_query
from tests.conftest import USER_ID, ScriptedVideoIndex, make_hits


CIVIC = VehicleSnapshot(id="veh-1", year="2001", make="Honda", model="Civic")


class AppendFailsStore(InMemoryDocumentStore):
    """Store that loses the connection on set-union appends."""

    async def array_union(self, key, field, values):
        raise StoreUnavailable("write timed out")


class TestBuildSearchQuery:
    """Test cases for query construction."""

    def test_token_order_and_normalization(self):
        assert build_search_query(" honda ", "Civic", "2001", " p0300 ") == "P0300 2001 honda Civic repair"

    def test_numeric_year(self):
        assert build_search_query("Ford", "F-150", 2014, "p0420") == "P0420 2014 Ford F-150 repair"

    def test_missing_year_is_skipped(self):
        assert build_search_query("Ford", "F-150", "", "P0420") == "P0420 Ford F-150 repair"
        assert build_search_query("Ford", "F-150", None, "P0420") == "P0420 Ford F-150 repair"

    @pytest.mark.parametrize("make,model,code", [
        ("Honda", "Civic", ""),
        ("Honda", "Civic", "   "),
        ("", "Civic", "P0300"),
        ("Honda", "  ", "P0300"),
        (None, "Civic", "P0300"),
    ])
    def test_empty_inputs(self, make, model, code):
        with pytest.raises(InvalidQuery):
            build_search_query(make, model, "2001", code)


class TestSearchRepairVideos:
    """Test cases for search without saving."""

    @pytest.mark.asyncio
    async def test_results_are_unrated(self, search_service, video_index):
        videos = await search_service.search_repair_videos("Honda", "Civic", "2001", "p0300")

        assert video_index.calls == [("P0300 2001 Honda Civic repair", 15)]
        assert [v.id for v in videos] == ["vid-a", "vid-b", "vid-c"]
        assert all(v.rated is False and v.isHelpful is None for v in videos)
        assert videos[0].channelTitle == "Test Channel"

    @pytest.mark.asyncio
    async def test_invalid_query_never_reaches_index(self, search_service, video_index):
        with pytest.raises(InvalidQuery):
            await search_service.search_repair_videos("Honda", "Civic", "2001", "")

        assert video_index.calls == []

    @pytest.mark.asyncio
    async def test_empty_result(self, history):
        service = SearchService(ScriptedVideoIndex(hits=[]), history)
        assert await service.search_repair_videos("Honda", "Civic", "2001", "P0300") == []

    @pytest.mark.asyncio
    async def test_quota_and_upstream_errors_are_distinct(self, history):
        quota = SearchService(ScriptedVideoIndex(error=QuotaExceeded()), history)
        upstream = SearchService(ScriptedVideoIndex(error=UpstreamError("boom")), history)

        with pytest.raises(QuotaExceeded):
            await quota.search_repair_videos("Honda", "Civic", "2001", "P0300")
        with pytest.raises(UpstreamError):
            await upstream.search_repair_videos("Honda", "Civic", "2001", "P0300")


class TestSearchAndSave:
    """Test cases for search followed by history append."""

    @pytest.mark.asyncio
    async def test_saves_entry(self, search_service, history):
        entry = await search_service.search_and_save(USER_ID, CIVIC, " p0300")

        assert entry.code == "P0300"
        assert entry.vehicle == CIVIC
        assert [v.id for v in entry.results] == ["vid-a", "vid-b", "vid-c"]

        listed = await history.list(USER_ID)
        assert [e.id for e in listed] == [entry.id]

    @pytest.mark.asyncio
    async def test_search_failure_saves_nothing(self, history, store):
        service = SearchService(ScriptedVideoIndex(error=QuotaExceeded()), history)

        with pytest.raises(QuotaExceeded):
            await service.search_and_save(USER_ID, CIVIC, "P0300")

        assert await history.list(USER_ID) == []

    @pytest.mark.asyncio
    async def test_save_failure_surfaces(self):
        """Search succeeded, save failed: the error reaches the caller and nothing is cached."""
        store = AppendFailsStore()
        index = ScriptedVideoIndex(hits=make_hits("x"))
        service = SearchService(index, SearchHistoryManager(ProfileStore(store)))

        with pytest.raises(StoreUnavailable):
            await service.search_and_save(USER_ID, CIVIC, "P0300")

        assert len(index.calls) == 1
        assert store.documents[USER_ID]["searchHistory"] == []

    @pytest.mark.asyncio
    async def test_requires_user_before_searching(self, search_service, video_index):
        with pytest.raises(NotAuthenticated):
            await search_service.search_and_save(None, CIVIC, "P0300")

        assert video_index.calls == []

    @pytest.mark.asyncio
    async def test_result_cap(self, history):
        index = ScriptedVideoIndex(hits=make_hits(*[f"v{i}" for i in range(20)]))
        service = SearchService(index, history, max_results=5)

        entry = await service.search_and_save(USER_ID, CIVIC, "P0300")

        assert index.calls[0][1] == 5
        assert len(entry.results) == 5


class TestVideoDetails:

    @pytest.mark.asyncio
    async def test_details(self, search_service):
        details = await search_service.get_video_details("vid-b")
        assert details.title == "Video vid-b"
        assert details.viewCount == 10
