"""
Profile API Routes

Endpoints for the user's profile document:
- GET / - Profile scalars (creates the document on first access)
- PUT /mechanic-email - Set mechanic contact address
- PUT /display-name - Set display name
"""
from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_current_user_id
from app.schemas.profile import (
    ProfileResponseSchema,
    MechanicEmailSchema,
    DisplayNameSchema
)
from app.services.profile_service import ProfileStore, get_profile_store

router = APIRouter()


@router.get(
    "/",
    response_model=ProfileResponseSchema,
    summary="Get profile",
    description="Get the current user's profile. The user document is created on first access."
)
async def get_profile(
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileStore = Depends(get_profile_store)
):
    profile = await profiles.get_profile(user_id)

    return ProfileResponseSchema(
        userId=user_id,
        displayName=profile.displayName,
        email=profile.email,
        mechanicEmail=profile.mechanicEmail,
        vehicleCount=len(profile.vehicles),
        searchCount=len(profile.searchHistory)
    )


@router.put(
    "/mechanic-email",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update mechanic email"
)
async def update_mechanic_email(
    payload: MechanicEmailSchema,
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileStore = Depends(get_profile_store)
):
    await profiles.update_mechanic_email(user_id, payload.mechanicEmail)


@router.put(
    "/display-name",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update display name"
)
async def update_display_name(
    payload: DisplayNameSchema,
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileStore = Depends(get_profile_store)
):
    await profiles.update_display_name(user_id, payload.displayName)
