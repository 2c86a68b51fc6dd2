"""Cookie (de)serialisation of the SpotifySession.

This is the only place that knows cookie names, lifetimes and flags. The
profile summary is URL-encoded JSON so the page can read it with
decodeURIComponent + JSON.parse.
"""

import json
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, unquote

from fastapi import Request
from starlette.responses import Response

from vibeset.config import (
    ACCESS_TOKEN_COOKIE,
    CALLBACK_COOKIE,
    COOKIE_SECURE,
    PENDING_COOKIE_MAX_AGE,
    REFRESH_TOKEN_COOKIE,
    REFRESH_TOKEN_MAX_AGE,
    STATE_COOKIE,
    USER_COOKIE,
    USER_COOKIE_MAX_AGE,
)
from vibeset.spotify import SpotifySession, safe_callback_path

PENDING_COOKIES = (STATE_COOKIE, CALLBACK_COOKIE)
SESSION_COOKIES = (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE, USER_COOKIE)


def encode_user_cookie(user: Dict[str, Any]) -> str:
    return quote(json.dumps(user, separators=(",", ":")), safe="")


def decode_user_cookie(value: Optional[str]) -> Optional[Dict[str, Any]]:
    if not value:
        return None
    try:
        user = json.loads(unquote(value))
    except ValueError:
        return None
    return user if isinstance(user, dict) else None


def session_from_cookies(cookies: Mapping[str, str]) -> SpotifySession:
    callback = cookies.get(CALLBACK_COOKIE)
    return SpotifySession(
        state_token=cookies.get(STATE_COOKIE) or None,
        callback_path=safe_callback_path(callback) if callback else None,
        access_token=cookies.get(ACCESS_TOKEN_COOKIE) or None,
        refresh_token=cookies.get(REFRESH_TOKEN_COOKIE) or None,
        user=decode_user_cookie(cookies.get(USER_COOKIE)),
    )


def get_spotify_session(request: Request) -> SpotifySession:
    """
    FastAPI dependency: the session carried by the request's cookies.
    """
    return session_from_cookies(request.cookies)


def _set(response: Response, key: str, value: str, max_age: int, httponly: bool = True) -> None:
    response.set_cookie(
        key,
        value,
        max_age=max_age,
        path="/",
        secure=COOKIE_SECURE,
        httponly=httponly,
        samesite="lax",
    )


def write_pending_cookies(response: Response, session: SpotifySession) -> None:
    _set(response, STATE_COOKIE, session.state_token or "", PENDING_COOKIE_MAX_AGE)
    _set(response, CALLBACK_COOKIE, session.callback_path or "/", PENDING_COOKIE_MAX_AGE)


def write_session_cookies(response: Response, session: SpotifySession) -> None:
    _set(response, ACCESS_TOKEN_COOKIE, session.access_token or "", session.access_token_max_age)

    if session.refresh_token:
        _set(response, REFRESH_TOKEN_COOKIE, session.refresh_token, REFRESH_TOKEN_MAX_AGE)

    if session.user:
        # Readable by the page for an immediate "logged in as" display
        _set(
            response,
            USER_COOKIE,
            encode_user_cookie(session.user),
            USER_COOKIE_MAX_AGE,
            httponly=False,
        )


def _delete(response: Response, key: str) -> None:
    response.delete_cookie(key, path="/", secure=COOKIE_SECURE, samesite="lax")


def clear_pending_cookies(response: Response) -> None:
    for key in PENDING_COOKIES:
        _delete(response, key)


def clear_session_cookies(response: Response) -> None:
    for key in SESSION_COOKIES + PENDING_COOKIES:
        _delete(response, key)
