from typing import List, Optional
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from .schemas import ErrorResponse


class SongsError(Exception):
    """Base class for errors raised by the songs service."""
    status_code: int = 500


class SongValidationError(SongsError):
    """A song record is missing ``title``/``artist`` or carries a non-text value."""
    status_code = 400

    def __init__(self, fields: List[str]):
        self.fields = fields
        super().__init__(f"Invalid song: missing or non-text field(s): {', '.join(fields)}")


def error_response(request: Request, status_code: int, error: str, detail: Optional[list] = None) -> JSONResponse:
    """Render an ``ErrorResponse`` tagged with the current request id"""
    body = ErrorResponse(
        error=error,
        status_code=status_code,
        request_id=getattr(request.state, "request_id", ""),
        detail=detail
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))
