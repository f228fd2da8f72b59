from typing import Optional
from pydantic import BaseModel

class ErrorResponse(BaseModel):
    """Body returned for every handled error"""
    error: str
    status_code: int
    request_id: str = ""
    detail: Optional[list] = None

class HealthResponse(BaseModel):
    status: str
    songs: int
    store_enabled: bool
