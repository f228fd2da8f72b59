import logging
import threading
from typing import Any, Dict, List, Mapping, Union
from ..core.errors import SongValidationError
from ..models.song import Song

logger = logging.getLogger(__name__)

SongRecord = Dict[str, Any]

REQUIRED_FIELDS = ("title", "artist")

class SongStore:
    def __init__(self, strict: bool = False):
        """Initialize an empty in-memory song store.

        Args:
            strict (bool): Reject records without a text ``title`` and ``artist``
        """
        self.strict = strict
        self._songs: List[SongRecord] = []
        self._lock = threading.Lock()

    def create(self, song: Union[Song, Mapping[str, Any]]) -> List[SongRecord]:
        """Append a song to the end of the collection.

        Args:
            song: Song model or mapping with at least ``title`` and ``artist``

        Returns:
            List[SongRecord]: Snapshot of the full collection after the append
        """
        record = song.model_dump() if isinstance(song, Song) else dict(song)
        if self.strict:
            self._validate(record)

        with self._lock:
            self._songs.append(record)
            snapshot = list(self._songs)

        logger.info(
            f"Created song '{record.get('title')}' by '{record.get('artist')}'",
            extra={"song_count": len(snapshot)}
        )
        return snapshot

    def find_all(self) -> List[SongRecord]:
        """Return a copy of all songs in insertion order."""
        with self._lock:
            songs = list(self._songs)
        logger.debug(f"Listing {len(songs)} songs")
        return songs

    def __len__(self) -> int:
        with self._lock:
            return len(self._songs)

    def _validate(self, record: SongRecord) -> None:
        invalid = [
            field for field in REQUIRED_FIELDS
            if not isinstance(record.get(field), str)
        ]
        if invalid:
            logger.warning(f"Rejected song with invalid fields: {invalid}")
            raise SongValidationError(invalid)
