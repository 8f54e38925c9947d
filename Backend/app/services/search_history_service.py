"""
Search History Service - Embedded Collection Manager

CRUD over the `searchHistory` array of the user document, including the
per-video helpfulness rating nested inside each entry's results.

Write patterns:
- add: set-union append
- delete / rate_video: read the whole array, change it in memory, write the
  whole array back. Anything another session appended in between is lost
  (last writer wins on the field). No locking, no version check, no retry.
- clear: overwrite the array with [] (other document fields untouched)
"""
import logging
from typing import Dict, List, Union

from app.models.search_entry import SearchEntry
from app.models.vehicle import VehicleSnapshot
from app.models.video import VideoResult
from app.services.profile_service import ProfileStore, get_profile_store
from app.core.exceptions import SearchNotFound, VideoNotFound


logger = logging.getLogger(__name__)

HISTORY_FIELD = "searchHistory"


class HistoryIndex:
    """
    Keyed view over a searchHistory snapshot:
    search id -> SearchEntry, and per entry video id -> VideoResult.

    Mutations touch only the addressed leaf; dump() rebuilds the array in
    its stored order for the whole-field write.
    """

    def __init__(self, entries: List[SearchEntry]):
        self._order = list(entries)
        self._entries: Dict[str, SearchEntry] = {}
        self._videos: Dict[str, Dict[str, VideoResult]] = {}

        for entry in self._order:
            if entry.id in self._entries:
                continue
            self._entries[entry.id] = entry
            videos = self._videos[entry.id] = {}
            for video in entry.results:
                videos.setdefault(video.id, video)

    def __len__(self):
        return len(self._order)

    def entry(self, search_id: str) -> SearchEntry:
        try:
            return self._entries[search_id]
        except KeyError:
            raise SearchNotFound(search_id) from None

    def video(self, search_id: str, video_id: str) -> VideoResult:
        self.entry(search_id)
        try:
            return self._videos[search_id][video_id]
        except KeyError:
            raise VideoNotFound(video_id, search_id) from None

    def rate(self, search_id: str, video_id: str, is_helpful: bool) -> VideoResult:
        video = self.video(search_id, video_id)
        video.rated = True
        video.isHelpful = is_helpful
        return video

    def dump(self) -> List[Dict]:
        return [entry.model_dump() for entry in self._order]


class SearchHistoryManager:
    """Service for the user's search history (Async)"""

    def __init__(self, profiles: ProfileStore):
        self.profiles = profiles
        self.store = profiles.store

    async def add(
        self,
        user_id: str,
        vehicle: VehicleSnapshot,
        code: str,
        results: List[VideoResult]
    ) -> SearchEntry:
        """
        Append a completed search.

        The vehicle is stored as a value copy.

        Returns:
            Stored entry with generated id and timestamp
        """
        user_id = await self.profiles.ensure_document(user_id)

        entry = SearchEntry(
            vehicle=VehicleSnapshot(
                id=vehicle.id,
                year=vehicle.year,
                make=vehicle.make,
                model=vehicle.model
            ),
            code=(code or "").strip().upper(),
            results=[VideoResult.model_validate(video.model_dump()) for video in results]
        )
        await self.store.array_union(user_id, HISTORY_FIELD, [entry.model_dump()])

        logger.info(f"Added search {entry.id} ({entry.code}, {len(entry.results)} videos) for {user_id}")
        return entry

    async def list(self, user_id: str) -> List[SearchEntry]:
        """All entries, newest first."""
        document = await self.profiles.load(user_id)
        return sorted(document.searchHistory, key=lambda entry: entry.timestamp, reverse=True)

    async def get(self, user_id: str, search_id: str) -> SearchEntry:
        document = await self.profiles.load(user_id)
        return HistoryIndex(document.searchHistory).entry(search_id)

    async def delete(self, user_id: str, entry: Union[str, SearchEntry]) -> bool:
        """
        Remove one entry.

        Returns:
            False if no entry with that id was present
        """
        search_id = entry if isinstance(entry, str) else entry.id
        document = await self.profiles.load(user_id)
        remaining = [e for e in document.searchHistory if e.id != search_id]

        if len(remaining) == len(document.searchHistory):
            logger.warning(f"Search {search_id} not found for {user_id}, nothing to delete")
            return False

        await self.store.update(user_id, {
            HISTORY_FIELD: [e.model_dump() for e in remaining]
        })

        logger.info(f"Deleted search {search_id} for {user_id}")
        return True

    async def clear(self, user_id: str) -> None:
        user_id = await self.profiles.ensure_document(user_id)
        await self.store.update(user_id, {HISTORY_FIELD: []})
        logger.info(f"Cleared search history for {user_id}")

    async def rate_video(
        self,
        user_id: str,
        search_id: str,
        video_id: str,
        is_helpful: bool
    ) -> VideoResult:
        """
        Mark one video of one history entry as rated.

        Raises:
            SearchNotFound: No entry with search_id
            VideoNotFound: Entry has no video with video_id
        """
        document = await self.profiles.load(user_id)

        index = HistoryIndex(document.searchHistory)
        video = index.rate(search_id, video_id, bool(is_helpful))

        await self.store.update(user_id, {HISTORY_FIELD: index.dump()})

        logger.info(
            f"Rated video {video_id} in search {search_id} for {user_id}: "
            f"{'helpful' if video.isHelpful else 'not helpful'}"
        )
        return video


def get_search_history_manager() -> SearchHistoryManager:
    """Dependency for getting the search history manager."""
    return SearchHistoryManager(get_profile_store())
