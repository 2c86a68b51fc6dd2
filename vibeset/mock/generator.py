"""Mock playlist generation from a free-text prompt.

The generator picks a genre pool with the classifier, sizes the playlist
from the prompt length and returns a random subset of the pool. It performs
no I/O.
"""

from typing import Optional

from vibeset.config import (
    PLAYLIST_NAME_DEFAULT,
    PLAYLIST_NAME_MAX_CHARS,
    PLAYLIST_NAME_PREFIX,
)
from vibeset.core.errors import InvalidInput
from vibeset.core.models import GeneratedPlaylist

from .classifier import pick_pool
from .randomness import RandomSource, get_random_source

MIN_TRACKS = 5
MAX_TRACKS = 10
ELLIPSIS = "…"


def desired_track_count(prompt: str) -> int:
    """
    One track per 10 characters of prompt, clamped to [5, 10].
    """
    return max(MIN_TRACKS, min(MAX_TRACKS, len(prompt) // 10))


def make_playlist_name(prompt: str) -> str:
    """
    Example:
      make_playlist_name('I love "jazz"') -> "AI Set: I love jazz"
    """
    cleaned = prompt.replace('"', "").replace("'", "").strip()
    if not cleaned:
        return f"{PLAYLIST_NAME_PREFIX}{PLAYLIST_NAME_DEFAULT}"

    short = cleaned[:PLAYLIST_NAME_MAX_CHARS]
    suffix = ELLIPSIS if len(cleaned) > PLAYLIST_NAME_MAX_CHARS else ""
    return f"{PLAYLIST_NAME_PREFIX}{short}{suffix}"


def generate_mock_playlist(
    prompt: Optional[str],
    rng: Optional[RandomSource] = None,
) -> GeneratedPlaylist:
    """
    Build a GeneratedPlaylist for `prompt`.

    Raises InvalidInput when the prompt is missing or blank.
    """
    prompt = (prompt or "").strip()
    if not prompt:
        raise InvalidInput("Missing prompt")

    rng = rng or get_random_source()

    pool = pick_pool(prompt)
    count = min(desired_track_count(prompt), len(pool))
    tracks = rng.shuffled(pool)[:count]

    return GeneratedPlaylist(
        prompt=prompt,
        playlist_name=make_playlist_name(prompt),
        tracks=tracks,
    )
