"""
Search API Routes

Endpoints for repair video search:
- GET /videos - Search only (nothing saved)
- POST / - Search and save to history
- GET /videos/{video_id} - Video details
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List

from app.core.dependencies import get_current_user_id
from app.models.search_entry import SearchEntry
from app.models.video import VideoResult, VideoDetails
from app.schemas.search import SearchRequestSchema
from app.services.search_service import SearchService, get_search_service

router = APIRouter()


@router.get(
    "/videos",
    response_model=List[VideoResult],
    summary="Search repair videos",
    description="Search repair videos for a vehicle and diagnostic trouble code without saving."
)
async def search_videos(
    make: str = Query(..., description="Vehicle make"),
    model: str = Query(..., description="Vehicle model"),
    year: str = Query("", description="Model year"),
    code: str = Query(..., description="Diagnostic trouble code, e.g. P0300"),
    user_id: str = Depends(get_current_user_id),
    search: SearchService = Depends(get_search_service)
):
    """
    Search repair videos.

    **Query format:** `<CODE> <YEAR> <MAKE> <MODEL> repair`

    **Errors:**
    - 400 - empty code, make or model
    - 429 - video search quota exhausted
    - 502 - video search service failure
    """
    return await search.search_repair_videos(make, model, year, code)


@router.post(
    "/",
    response_model=SearchEntry,
    status_code=status.HTTP_201_CREATED,
    summary="Search and save",
    description="Search repair videos and add the search to the user's history."
)
async def search_and_save(
    payload: SearchRequestSchema,
    user_id: str = Depends(get_current_user_id),
    search: SearchService = Depends(get_search_service)
):
    return await search.search_and_save(user_id, payload.vehicle, payload.code)


@router.get(
    "/videos/{video_id}",
    response_model=VideoDetails,
    summary="Get video details"
)
async def get_video_details(
    video_id: str,
    user_id: str = Depends(get_current_user_id),
    search: SearchService = Depends(get_search_service)
):
    return await search.get_video_details(video_id)
