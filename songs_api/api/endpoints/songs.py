import logging
from typing import Any, Dict, List, Optional
from fastapi import Body
from ...services.song_service import SongStore, SongRecord

logger = logging.getLogger(__name__)

# Record created by POST /songs; the request body is not read
DEFAULT_SONG: Dict[str, str] = {"title": "Ulazi ", "artist": "Amaroto "}

SONG_RECEIVED = "Song Received!!"
SONG_UPDATED = "Song updated succesfully!!"
SONG_REMOVED = "Song removed succesfully!!"

# Stub mode only
SONGS_FOUND = "Find All Songs!!"
SONG_ADDED = "Song added succesfully!!"

class SongsController:
    """Handlers for the /songs routes.

    List and create go through the store given at construction. Get-one,
    update and delete are stubs that return a fixed message and never
    consult the store, whatever id is supplied.
    """

    def __init__(self, store: SongStore):
        self.store = store

    async def find_all(self) -> List[SongRecord]:
        """List every song in insertion order"""
        return self.store.find_all()

    async def find_one(self, song_id: str) -> str:
        return SONG_RECEIVED

    async def add_song(self) -> List[SongRecord]:
        """Create the default song and return the full list"""
        return self.store.create(DEFAULT_SONG)

    async def add_song_from_body(
        self,
        song: Optional[Dict[str, Any]] = Body(None)
    ) -> List[SongRecord]:
        """Create the song sent in the body, or the default song when there is none"""
        if not song:
            logger.debug("Empty request body, creating default song")
            song = DEFAULT_SONG
        return self.store.create(song)

    async def change_song(self, song_id: str) -> str:
        return SONG_UPDATED

    async def remove_song(self, song_id: str) -> str:
        return SONG_REMOVED

    # Stub mode handlers
    async def find_all_stub(self) -> str:
        return SONGS_FOUND

    async def add_song_stub(self) -> str:
        return SONG_ADDED
