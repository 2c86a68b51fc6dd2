"""Public façade for the vibeset.spotify package.

This module exposes the Spotify OAuth helpers (authorize URL, code
exchange, profile lookup) and the SpotifySession state object. Callers
should import these symbols from this façade instead of the internal auth
or session modules.
"""

from .auth import (
    SpotifyAuthError,
    build_spotify_auth_url,
    exchange_code_for_token,
    get_current_user_profile,
    new_state_token,
    spotify_headers,
)
from .session import (
    DEFAULT_CALLBACK_PATH,
    SpotifySession,
    complete_authorization,
    profile_summary,
    public_user,
    safe_callback_path,
    start_authorization,
)

__all__ = [
    "SpotifyAuthError",
    "build_spotify_auth_url",
    "exchange_code_for_token",
    "get_current_user_profile",
    "new_state_token",
    "spotify_headers",
    "DEFAULT_CALLBACK_PATH",
    "SpotifySession",
    "complete_authorization",
    "profile_summary",
    "public_user",
    "safe_callback_path",
    "start_authorization",
]
