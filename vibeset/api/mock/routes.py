from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from vibeset.api.schemas import PromptRequest
from vibeset.core import InvalidInput, log_info, log_step
from vibeset.mock import (
    RandomSource,
    create_mock_playlist,
    generate_mock_playlist,
    get_random_source,
)

from .schemas import (
    CreatePlaylistRequest,
    CreatePlaylistResponse,
    GenerateResponse,
    TrackInfo,
)

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
def mock_generate(
    payload: Optional[PromptRequest] = None,
    rng: RandomSource = Depends(get_random_source),
) -> GenerateResponse:
    """
    Fill a playlist with mock tracks picked from the genre pool matching
    the prompt.
    """
    prompt = payload.prompt if payload else None
    try:
        playlist = generate_mock_playlist(prompt, rng=rng)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))

    log_info(f"Mock playlist: {len(playlist.tracks)} tracks for {playlist.playlist_name!r}")

    return GenerateResponse(
        prompt=playlist.prompt,
        playlist_name=playlist.playlist_name,
        tracks=[TrackInfo(**t.to_dict()) for t in playlist.tracks],
    )


@router.post("/create-playlist", response_model=CreatePlaylistResponse)
def mock_create_playlist(
    payload: Optional[CreatePlaylistRequest] = None,
    rng: RandomSource = Depends(get_random_source),
) -> CreatePlaylistResponse:
    """
    Pretend to create the playlist on Spotify.
    """
    payload = payload or CreatePlaylistRequest()
    try:
        created = create_mock_playlist(payload.playlist_name, payload.tracks, rng=rng)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))

    log_step(f"Mock playlist created: {created.id} ({created.track_count} tracks)")

    return CreatePlaylistResponse(**created.to_dict())
