from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Track:
    id: str
    title: str
    artist: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "title": self.title, "artist": self.artist}


@dataclass
class GeneratedPlaylist:
    """
    Mock playlist built from a prompt.

    - prompt        : the trimmed user prompt
    - playlist_name : name derived from the prompt ("AI Set: ...")
    - tracks        : distinct tracks picked from a single genre pool
    """

    prompt: str
    playlist_name: str
    tracks: List[Track] = field(default_factory=list)


@dataclass
class CreatedPlaylist:
    """Shape of a "created" Spotify playlist, without any real Spotify call."""

    id: str
    url: str
    playlist_name: str
    track_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "playlistName": self.playlist_name,
            "trackCount": self.track_count,
        }
