"""
Vehicle Service - Embedded Collection Manager

CRUD over the `vehicles` array of the user document.

Write patterns:
- add: set-union append (safe against concurrent appends from another session)
- update: single positional replace keyed on the vehicle id
- delete: read the array, filter, write the whole array back
  (last writer wins on the field; accepted under one active session per user)
"""
import logging
from typing import List, Union

from app.models.vehicle import Vehicle, VehicleSnapshot
from app.schemas.vehicle import VehicleCreateSchema
from app.services.profile_service import ProfileStore, get_profile_store
from app.core.exceptions import VehicleNotFound


logger = logging.getLogger(__name__)

VEHICLES_FIELD = "vehicles"


def _vehicle_id(vehicle: Union[str, VehicleSnapshot]) -> str:
    return vehicle if isinstance(vehicle, str) else (vehicle.id or "")


class VehicleManager:
    """Service for the user's saved vehicles (Async)"""

    def __init__(self, profiles: ProfileStore):
        self.profiles = profiles
        self.store = profiles.store

    async def add(self, user_id: str, vehicle_data: VehicleCreateSchema) -> Vehicle:
        """
        Save a new vehicle.

        Returns:
            Stored vehicle with generated id and addedAt
        """
        user_id = await self.profiles.ensure_document(user_id)

        vehicle = Vehicle(
            year=vehicle_data.year,
            make=vehicle_data.make,
            model=vehicle_data.model
        )
        await self.store.array_union(user_id, VEHICLES_FIELD, [vehicle.model_dump()])

        logger.info(f"Added vehicle {vehicle.id} ({vehicle.display_name}) for {user_id}")
        return vehicle

    async def list(self, user_id: str) -> List[Vehicle]:
        """All saved vehicles in insertion order."""
        document = await self.profiles.load(user_id)
        return document.vehicles

    async def get(self, user_id: str, vehicle_id: str) -> Vehicle:
        for vehicle in await self.list(user_id):
            if vehicle.id == vehicle_id:
                return vehicle
        raise VehicleNotFound(vehicle_id)

    async def update(self, user_id: str, vehicle: VehicleSnapshot) -> Vehicle:
        """
        Replace year/make/model of a saved vehicle.
        id and addedAt are kept from the stored record.

        Raises:
            VehicleNotFound: No vehicle with that id in the current snapshot
        """
        vehicle_id = _vehicle_id(vehicle)
        current = await self.get(user_id, vehicle_id)

        updated = current.model_copy(update={
            "year": vehicle.year,
            "make": vehicle.make,
            "model": vehicle.model
        })

        replaced = await self.store.replace_in_array(
            user_id, VEHICLES_FIELD, vehicle_id, updated.model_dump()
        )
        if not replaced:
            # Deleted by another session between the read and the write
            raise VehicleNotFound(vehicle_id)

        logger.info(f"Updated vehicle {vehicle_id} for {user_id}")
        return updated

    async def delete(self, user_id: str, vehicle: Union[str, VehicleSnapshot]) -> bool:
        """
        Remove a saved vehicle.

        Returns:
            False if no vehicle with that id was present
        """
        vehicle_id = _vehicle_id(vehicle)
        current = await self.list(user_id)
        remaining = [v for v in current if v.id != vehicle_id]

        if len(remaining) == len(current):
            logger.warning(f"Vehicle {vehicle_id} not found for {user_id}, nothing to delete")
            return False

        await self.store.update(user_id, {
            VEHICLES_FIELD: [v.model_dump() for v in remaining]
        })

        logger.info(f"Deleted vehicle {vehicle_id} for {user_id}")
        return True


def get_vehicle_manager() -> VehicleManager:
    """Dependency for getting the vehicle manager."""
    return VehicleManager(get_profile_store())
