from pydantic import BaseModel, Field, BeforeValidator
from typing import Annotated

from app.models.vehicle import coerce_str


# ============================================================================
# Vehicle Schemas (matching frontend vehicle form)
# ============================================================================

class VehicleCreateSchema(BaseModel):
    """Vehicle form data: {year, make, model}"""
    year: Annotated[str, BeforeValidator(coerce_str)] = Field("", max_length=4, description="Model year")
    make: Annotated[str, BeforeValidator(coerce_str)] = Field(..., min_length=1, max_length=100, description="Vehicle make")
    model: Annotated[str, BeforeValidator(coerce_str)] = Field(..., min_length=1, max_length=100, description="Vehicle model")

    class Config:
        json_schema_extra = {
            "example": {
                "year": "2001",
                "make": "Honda",
                "model": "Civic"
            }
        }


class VehicleUpdateSchema(VehicleCreateSchema):
    """Full-record replace of year/make/model"""
    pass


class DeleteResponseSchema(BaseModel):
    deleted: bool
