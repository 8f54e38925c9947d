"""
Vehicles API Routes

Endpoints for the user's saved vehicles:
- GET / - List saved vehicles
- POST / - Save a vehicle
- GET /{vehicle_id} - Get one vehicle
- PUT /{vehicle_id} - Replace year/make/model
- DELETE /{vehicle_id} - Remove a vehicle
"""
from fastapi import APIRouter, Depends, status
from typing import List

from app.core.dependencies import get_current_user_id
from app.models.vehicle import Vehicle, VehicleSnapshot
from app.schemas.vehicle import (
    VehicleCreateSchema,
    VehicleUpdateSchema,
    DeleteResponseSchema
)
from app.services.vehicle_service import VehicleManager, get_vehicle_manager

router = APIRouter()


@router.get(
    "/",
    response_model=List[Vehicle],
    summary="List saved vehicles"
)
async def list_vehicles(
    user_id: str = Depends(get_current_user_id),
    vehicles: VehicleManager = Depends(get_vehicle_manager)
):
    return await vehicles.list(user_id)


@router.post(
    "/",
    response_model=Vehicle,
    status_code=status.HTTP_201_CREATED,
    summary="Save a vehicle",
    description="Save a vehicle to the user's profile. The id and addedAt are generated."
)
async def add_vehicle(
    payload: VehicleCreateSchema,
    user_id: str = Depends(get_current_user_id),
    vehicles: VehicleManager = Depends(get_vehicle_manager)
):
    return await vehicles.add(user_id, payload)


@router.get(
    "/{vehicle_id}",
    response_model=Vehicle,
    summary="Get a saved vehicle"
)
async def get_vehicle(
    vehicle_id: str,
    user_id: str = Depends(get_current_user_id),
    vehicles: VehicleManager = Depends(get_vehicle_manager)
):
    return await vehicles.get(user_id, vehicle_id)


@router.put(
    "/{vehicle_id}",
    response_model=Vehicle,
    summary="Update a saved vehicle",
    description="Replace year, make and model. Past search history keeps its own copy of the vehicle."
)
async def update_vehicle(
    vehicle_id: str,
    payload: VehicleUpdateSchema,
    user_id: str = Depends(get_current_user_id),
    vehicles: VehicleManager = Depends(get_vehicle_manager)
):
    vehicle = VehicleSnapshot(id=vehicle_id, **payload.model_dump())
    return await vehicles.update(user_id, vehicle)


@router.delete(
    "/{vehicle_id}",
    response_model=DeleteResponseSchema,
    summary="Delete a saved vehicle",
    description="Returns deleted=false when the vehicle was already gone."
)
async def delete_vehicle(
    vehicle_id: str,
    user_id: str = Depends(get_current_user_id),
    vehicles: VehicleManager = Depends(get_vehicle_manager)
):
    deleted = await vehicles.delete(user_id, vehicle_id)
    return DeleteResponseSchema(deleted=deleted)
