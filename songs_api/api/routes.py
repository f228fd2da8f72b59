import logging
from typing import List, NamedTuple, Type
from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from .endpoints.songs import SongsController

logger = logging.getLogger(__name__)

class Route(NamedTuple):
    method: str
    path: str
    handler: str  # SongsController method name
    status_code: int = 200
    response_class: Type[Response] = JSONResponse

# Store-backed song routes
SONG_ROUTES: List[Route] = [
    Route("GET", "", "find_all"),
    Route("GET", "/{song_id}", "find_one", response_class=PlainTextResponse),
    Route("POST", "", "add_song", status_code=201),
    Route("PUT", "/{song_id}", "change_song", response_class=PlainTextResponse),
    Route("DELETE", "/{song_id}", "remove_song", response_class=PlainTextResponse),
]

# Same surface with list and create stubbed out as well
STUB_SONG_ROUTES: List[Route] = [
    Route("GET", "", "find_all_stub", response_class=PlainTextResponse),
    Route("GET", "/{song_id}", "find_one", response_class=PlainTextResponse),
    Route("POST", "", "add_song_stub", status_code=201, response_class=PlainTextResponse),
    Route("PUT", "/{song_id}", "change_song", response_class=PlainTextResponse),
    Route("DELETE", "/{song_id}", "remove_song", response_class=PlainTextResponse),
]

def select_song_routes(store_enabled: bool = True, accept_body: bool = False) -> List[Route]:
    """Pick the route table for the configured mode"""
    if not store_enabled:
        return STUB_SONG_ROUTES
    if accept_body:
        return [
            route._replace(handler="add_song_from_body") if route.handler == "add_song" else route
            for route in SONG_ROUTES
        ]
    return SONG_ROUTES

def build_songs_router(controller: SongsController, routes: List[Route] = SONG_ROUTES) -> APIRouter:
    """Register each route of the table on a new router, in table order"""
    songs_router = APIRouter()
    for route in routes:
        logger.debug(f"Registering {route.method} {route.path or '/'} -> {route.handler}")
        songs_router.add_api_route(
            route.path,
            getattr(controller, route.handler),
            methods=[route.method],
            status_code=route.status_code,
            response_class=route.response_class,
            name=route.handler
        )
    return songs_router
