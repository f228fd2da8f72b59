from pydantic import BaseModel, ConfigDict

class Song(BaseModel):
    """A song record. Any fields beyond title and artist are kept as-is."""
    model_config = ConfigDict(extra="allow")

    title: str
    artist: str
