from typing import Any, Optional, Sequence

from vibeset.config import MOCK_PLAYLIST_URL_BASE
from vibeset.core.errors import InvalidInput
from vibeset.core.models import CreatedPlaylist

from .randomness import RandomSource, get_random_source


def create_mock_playlist(
    playlist_name: Optional[str],
    tracks: Optional[Sequence[Any]],
    rng: Optional[RandomSource] = None,
) -> CreatedPlaylist:
    """
    Fake a Spotify playlist creation.

    Nothing is created on Spotify: the id is random and the url only has the
    shape of a real playlist link.
    """
    name = (playlist_name or "").strip()
    if not name:
        raise InvalidInput("Missing playlistName")

    if not isinstance(tracks, (list, tuple)) or len(tracks) == 0:
        raise InvalidInput("No tracks to add")

    rng = rng or get_random_source()
    playlist_id = f"mock_{rng.hex_id()}"

    return CreatedPlaylist(
        id=playlist_id,
        url=f"{MOCK_PLAYLIST_URL_BASE}/{playlist_id}",
        playlist_name=name,
        track_count=len(tracks),
    )
