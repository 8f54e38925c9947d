"""
Search History API Routes

Endpoints for the user's past searches:
- GET / - List searches, newest first
- DELETE / - Clear all searches
- GET /{search_id} - Get one search with its videos
- DELETE /{search_id} - Remove one search
- POST /{search_id}/videos/{video_id}/rating - Rate a video helpful / not helpful
- GET /{search_id}/email - Compose the mechanic email for a search
"""
from fastapi import APIRouter, Depends, status
from typing import List

from app.core.dependencies import get_current_user_id
from app.models.search_entry import SearchEntry
from app.models.video import VideoResult
from app.schemas.search import RatingRequestSchema
from app.schemas.profile import MechanicEmailResponseSchema
from app.schemas.vehicle import DeleteResponseSchema
from app.services.email_service import compose_mechanic_email
from app.services.profile_service import ProfileStore, get_profile_store
from app.services.search_history_service import SearchHistoryManager, get_search_history_manager

router = APIRouter()


@router.get(
    "/",
    response_model=List[SearchEntry],
    summary="List search history"
)
async def list_history(
    user_id: str = Depends(get_current_user_id),
    history: SearchHistoryManager = Depends(get_search_history_manager)
):
    return await history.list(user_id)


@router.delete(
    "/",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear search history",
    description="Remove every search. Saved vehicles and profile fields are untouched."
)
async def clear_history(
    user_id: str = Depends(get_current_user_id),
    history: SearchHistoryManager = Depends(get_search_history_manager)
):
    await history.clear(user_id)


@router.get(
    "/{search_id}",
    response_model=SearchEntry,
    summary="Get a past search"
)
async def get_search(
    search_id: str,
    user_id: str = Depends(get_current_user_id),
    history: SearchHistoryManager = Depends(get_search_history_manager)
):
    return await history.get(user_id, search_id)


@router.delete(
    "/{search_id}",
    response_model=DeleteResponseSchema,
    summary="Delete a past search",
    description="Returns deleted=false when the search was already gone."
)
async def delete_search(
    search_id: str,
    user_id: str = Depends(get_current_user_id),
    history: SearchHistoryManager = Depends(get_search_history_manager)
):
    deleted = await history.delete(user_id, search_id)
    return DeleteResponseSchema(deleted=deleted)


@router.post(
    "/{search_id}/videos/{video_id}/rating",
    response_model=VideoResult,
    summary="Rate a video",
    description="Mark a video from a past search as helpful or not helpful. Ratings cannot be removed."
)
async def rate_video(
    search_id: str,
    video_id: str,
    payload: RatingRequestSchema,
    user_id: str = Depends(get_current_user_id),
    history: SearchHistoryManager = Depends(get_search_history_manager)
):
    return await history.rate_video(user_id, search_id, video_id, payload.isHelpful)


@router.get(
    "/{search_id}/email",
    response_model=MechanicEmailResponseSchema,
    summary="Compose mechanic email",
    description="Pre-filled subject, body and mailto: link for the profile's mechanic address."
)
async def compose_email(
    search_id: str,
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileStore = Depends(get_profile_store),
    history: SearchHistoryManager = Depends(get_search_history_manager)
):
    profile = await profiles.load(user_id)
    entry = await history.get(user_id, search_id)

    email = compose_mechanic_email(profile.mechanicEmail, entry.vehicle, entry.code, entry.results)

    return MechanicEmailResponseSchema(
        to=email.to,
        subject=email.subject,
        body=email.body,
        mailtoUrl=email.mailto_url,
        searchId=entry.id
    )
