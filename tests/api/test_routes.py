from fastapi.responses import PlainTextResponse
from songs_api.api.endpoints.songs import SongsController
from songs_api.api.routes import (
    SONG_ROUTES,
    STUB_SONG_ROUTES,
    build_songs_router,
    select_song_routes,
)
from songs_api.services.song_service import SongStore

def test_route_table_shape():
    """Five routes, one per verb and path shape."""
    assert [(route.method, route.path) for route in SONG_ROUTES] == [
        ("GET", ""),
        ("GET", "/{song_id}"),
        ("POST", ""),
        ("PUT", "/{song_id}"),
        ("DELETE", "/{song_id}"),
    ]
    assert [(route.method, route.path) for route in STUB_SONG_ROUTES] == [
        (route.method, route.path) for route in SONG_ROUTES
    ]

def test_every_handler_exists():
    for route in SONG_ROUTES + STUB_SONG_ROUTES:
        assert callable(getattr(SongsController, route.handler))

def test_select_song_routes():
    assert select_song_routes() is SONG_ROUTES
    assert select_song_routes(store_enabled=False) is STUB_SONG_ROUTES
    assert select_song_routes(store_enabled=False, accept_body=True) is STUB_SONG_ROUTES

    body_routes = select_song_routes(accept_body=True)
    assert [route.handler for route in body_routes] == [
        "find_all", "find_one", "add_song_from_body", "change_song", "remove_song"
    ]
    # The default table is left alone
    assert SONG_ROUTES[2].handler == "add_song"

def test_stub_routes_serve_plain_text():
    for route in SONG_ROUTES:
        if route.handler in ("find_one", "change_song", "remove_song"):
            assert route.response_class is PlainTextResponse
    assert all(route.response_class is PlainTextResponse for route in STUB_SONG_ROUTES)

def test_build_songs_router_registers_table_in_order():
    controller = SongsController(SongStore())
    router = build_songs_router(controller)

    registered = [(next(iter(route.methods)), route.path, route.name) for route in router.routes]
    assert registered == [
        (route.method, route.path, route.handler) for route in SONG_ROUTES
    ]

def test_controller_uses_given_store():
    """The controller reads and writes the store it was built with."""
    store = SongStore()
    controller = SongsController(store)
    assert controller.store is store
