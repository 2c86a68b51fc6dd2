import secrets
from typing import Dict, Optional
from urllib.parse import urlencode

import requests

from vibeset.config import (
    SCOPES,
    SPOTIFY_API_BASE,
    SPOTIFY_AUTH_URL,
    SPOTIFY_HTTP_TIMEOUT,
    SPOTIFY_TOKEN_URL,
)


class SpotifyAuthError(Exception):
    """Spotify answered an auth-related request with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def new_state_token() -> str:
    """
    Unpredictable CSRF state token for one authorization round-trip.
    """
    return secrets.token_urlsafe(24)


def build_spotify_auth_url(client_id: str, redirect_uri: str, state: str) -> str:
    auth_query_parameters = {
        "client_id": client_id,
        "response_type": "code",
        "redirect_uri": redirect_uri,
        "scope": " ".join(SCOPES),
        "state": state,
        "show_dialog": "false",
    }
    return f"{SPOTIFY_AUTH_URL}?{urlencode(auth_query_parameters)}"


def exchange_code_for_token(
    code: str,
    client_id: str,
    client_secret: str,
    redirect_uri: str,
) -> Dict:
    """
    Exchange an authorization code for access/refresh tokens.

    Client credentials travel as HTTP Basic auth. Raises SpotifyAuthError on
    a non-success status; transport errors propagate as requests exceptions.
    """
    token_data = {
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": redirect_uri,
    }
    r = requests.post(
        SPOTIFY_TOKEN_URL,
        data=token_data,
        auth=(client_id, client_secret),
        timeout=SPOTIFY_HTTP_TIMEOUT,
    )
    if not r.ok:
        raise SpotifyAuthError(
            f"Spotify token exchange failed ({r.status_code}): {r.text[:200]}",
            status_code=r.status_code,
        )
    return r.json()


def spotify_headers(access_token: str) -> Dict:
    return {"Authorization": f"Bearer {access_token}"}


def get_current_user_profile(access_token: str) -> Dict:
    """
    GET /me with the given access token.

    Raises SpotifyAuthError when Spotify rejects the token or answers
    with something other than a JSON object.
    """
    r = requests.get(
        f"{SPOTIFY_API_BASE}/me",
        headers=spotify_headers(access_token),
        timeout=SPOTIFY_HTTP_TIMEOUT,
    )
    if not r.ok:
        raise SpotifyAuthError(
            f"Spotify profile request failed ({r.status_code}).",
            status_code=r.status_code,
        )

    profile = r.json()
    if not isinstance(profile, dict):
        raise SpotifyAuthError(
            "Spotify profile response is not an object.",
            status_code=r.status_code,
        )
    return profile
