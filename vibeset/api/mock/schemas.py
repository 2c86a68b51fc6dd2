from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vibeset.api.schemas import scalar_to_text


class TrackInfo(BaseModel):
    id: str
    title: str
    artist: str


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    playlist_name: str = Field(alias="playlistName")
    tracks: List[TrackInfo]


class CreatePlaylistRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    playlist_name: Optional[str] = Field(default=None, alias="playlistName")
    # Anything that is not a list is treated as "no tracks"
    tracks: Any = None

    @field_validator("playlist_name", mode="before")
    @classmethod
    def playlist_name_as_text(cls, value: Any) -> Any:
        return scalar_to_text(value)


class CreatePlaylistResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    url: str
    playlist_name: str = Field(alias="playlistName")
    track_count: int = Field(alias="trackCount")
