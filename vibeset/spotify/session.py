"""Spotify login session carried by the browser.

A SpotifySession is the explicit, in-memory view of the session cookies for
one request. Routers build it from the incoming cookies, pass it to the
functions below, and write it back as cookies on the response; nothing in
this module knows about cookies.

States:
    anonymous --start_authorization--> pending
    pending   --complete_authorization--> authenticated
    any       --logout--> anonymous
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from vibeset.config import ACCESS_TOKEN_DEFAULT_MAX_AGE

from .auth import new_state_token

DEFAULT_CALLBACK_PATH = "/"


@dataclass(frozen=True)
class SpotifySession:
    state_token: Optional[str] = None
    callback_path: Optional[str] = None
    access_token: Optional[str] = None
    access_token_max_age: int = ACCESS_TOKEN_DEFAULT_MAX_AGE
    refresh_token: Optional[str] = None
    user: Optional[Dict[str, Any]] = None

    @property
    def is_pending(self) -> bool:
        return self.state_token is not None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    def state_matches(self, state: Optional[str]) -> bool:
        """
        Exact comparison of the returned `state` against the stored token.
        """
        return bool(self.state_token) and state == self.state_token


def safe_callback_path(path: Optional[str]) -> str:
    """
    Keep post-login redirects on this site.

    Example:
      safe_callback_path("/?tab=1")          -> "/?tab=1"
      safe_callback_path("https://evil.com") -> "/"
      safe_callback_path("//evil.com")       -> "/"
    """
    if not path or not path.startswith("/") or path.startswith("//"):
        return DEFAULT_CALLBACK_PATH
    if "\\" in path:
        return DEFAULT_CALLBACK_PATH
    return path


def profile_summary(profile: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not isinstance(profile, dict) or not profile:
        return None
    return {
        "id": profile.get("id"),
        "display_name": profile.get("display_name"),
        "email": profile.get("email"),
    }


def public_user(profile: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Live profile as exposed by the user-status endpoint.
    """
    if not isinstance(profile, dict):
        return None
    images = profile.get("images") or []
    image = images[0].get("url") if images and isinstance(images[0], dict) else None
    return {
        "id": profile.get("id"),
        "display_name": profile.get("display_name") or profile.get("id"),
        "email": profile.get("email"),
        "image": image,
    }


def start_authorization(callback_path: Optional[str]) -> SpotifySession:
    return SpotifySession(
        state_token=new_state_token(),
        callback_path=safe_callback_path(callback_path),
    )


def complete_authorization(
    session: SpotifySession,
    token_info: Dict[str, Any],
    profile: Optional[Dict[str, Any]],
) -> SpotifySession:
    """
    Turn a pending session into an authenticated one.

    The pending state token is dropped; the callback path is kept so the
    router knows where to send the user.
    """
    return replace(
        session,
        state_token=None,
        access_token=token_info["access_token"],
        access_token_max_age=int(
            token_info.get("expires_in") or ACCESS_TOKEN_DEFAULT_MAX_AGE
        ),
        refresh_token=token_info.get("refresh_token"),
        user=profile_summary(profile),
    )
