from pydantic import BaseModel, Field, BeforeValidator
from typing import Annotated

from app.models.vehicle import VehicleSnapshot, coerce_str


# ============================================================================
# Search Schemas
# ============================================================================

class SearchRequestSchema(BaseModel):
    """Search-and-save request: a vehicle (saved or typed in) plus a code"""
    vehicle: VehicleSnapshot = Field(..., description="Vehicle snapshot {id?, year, make, model}")
    code: Annotated[str, BeforeValidator(coerce_str)] = Field(..., min_length=1, max_length=10, description="Diagnostic trouble code")

    class Config:
        json_schema_extra = {
            "example": {
                "vehicle": {"id": None, "year": "2001", "make": "Honda", "model": "Civic"},
                "code": "P0300"
            }
        }


class RatingRequestSchema(BaseModel):
    """Helpfulness rating for one video"""
    isHelpful: bool = Field(..., description="Whether the video was helpful")
