"""Public façade for the vibeset.mock package.

Static track pools, the prompt classifier, and the mock playlist
generator/creator used while the real Spotify integration does not exist.
"""

from .classifier import POOL_RULES, PoolRule, pick_pool, pick_pool_key
from .creator import create_mock_playlist
from .generator import (
    desired_track_count,
    generate_mock_playlist,
    make_playlist_name,
)
from .pools import DEFAULT_POOL_KEY, POOLS, get_pool
from .randomness import RandomSource, get_random_source

__all__ = [
    "POOLS",
    "DEFAULT_POOL_KEY",
    "get_pool",
    "POOL_RULES",
    "PoolRule",
    "pick_pool",
    "pick_pool_key",
    "desired_track_count",
    "make_playlist_name",
    "generate_mock_playlist",
    "create_mock_playlist",
    "RandomSource",
    "get_random_source",
]
