"""
Domain Exceptions

Every error the core raises. Callers (API routes, scripts) decide how to
present them; the core never retries and never swallows them.
"""
from typing import Optional


class CodeDIYError(Exception):
    """Base exception. Carries the HTTP status the API layer maps it to."""
    status_code: int = 500
    default_message: str = "Unexpected error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotAuthenticated(CodeDIYError):
    """No active user context"""
    status_code = 401
    default_message = "User not authenticated"


class StoreUnavailable(CodeDIYError):
    """Transport or backing-store failure"""
    status_code = 503
    default_message = "Document store unavailable"


class VehicleNotFound(CodeDIYError):
    status_code = 404

    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} not found")


class SearchNotFound(CodeDIYError):
    status_code = 404

    def __init__(self, search_id: str):
        self.search_id = search_id
        super().__init__(f"Search {search_id} not found")


class VideoNotFound(CodeDIYError):
    status_code = 404

    def __init__(self, video_id: str, search_id: Optional[str] = None):
        self.video_id = video_id
        self.search_id = search_id
        if search_id:
            message = f"Video {video_id} not found in search {search_id}"
        else:
            message = f"Video {video_id} not found"
        super().__init__(message)


class InvalidQuery(CodeDIYError):
    """Empty or malformed search input"""
    status_code = 400
    default_message = "Invalid search query"


class MechanicEmailNotSet(CodeDIYError):
    status_code = 400
    default_message = "Mechanic email is not set"


class QuotaExceeded(CodeDIYError):
    """Upstream rate limit / daily quota exhausted"""
    status_code = 429
    default_message = "Video search quota exceeded. Please try again tomorrow."


class UpstreamError(CodeDIYError):
    """Generic external-service failure"""
    status_code = 502
    default_message = "Video search service failed"
