from pydantic import BaseModel, Field, BeforeValidator
from datetime import datetime
from typing import Optional, Annotated, Any
import uuid


def coerce_str(v: Any) -> str:
    if v is None:
        return ""
    # Years typed as numbers by older clients
    return str(v).strip()


class VehicleSnapshot(BaseModel):
    """
    Vehicle as copied into a search history entry.
    A value copy: later edits to the saved Vehicle never reach it.
    """
    id: Optional[str] = None
    year: Annotated[str, BeforeValidator(coerce_str)] = ""
    make: Annotated[str, BeforeValidator(coerce_str)] = ""
    model: Annotated[str, BeforeValidator(coerce_str)] = ""

    @property
    def display_name(self):
        """Return formatted vehicle name."""
        return " ".join(filter(None, [self.year, self.make, self.model]))


class Vehicle(VehicleSnapshot):
    """
    Vehicle model.
    Embedded in the user document's `vehicles` array.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    addedAt: datetime = Field(default_factory=datetime.utcnow)

    def snapshot(self) -> VehicleSnapshot:
        return VehicleSnapshot(id=self.id, year=self.year, make=self.make, model=self.model)
