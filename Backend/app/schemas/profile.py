from pydantic import BaseModel, Field
from typing import Optional


# ============================================================================
# Profile Schemas
# ============================================================================

class ProfileResponseSchema(BaseModel):
    """Profile scalars plus collection sizes"""
    userId: str
    displayName: str = ""
    email: str = ""
    mechanicEmail: str = ""
    vehicleCount: int = 0
    searchCount: int = 0


class MechanicEmailSchema(BaseModel):
    mechanicEmail: str = Field("", max_length=254, description="Mechanic contact address (empty clears it)")


class DisplayNameSchema(BaseModel):
    displayName: str = Field(..., max_length=100)


class MechanicEmailResponseSchema(BaseModel):
    to: str
    subject: str
    body: str
    mailtoUrl: str
    searchId: Optional[str] = None
