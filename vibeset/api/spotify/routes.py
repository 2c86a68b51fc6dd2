from typing import Optional
from urllib.parse import urlencode

import requests
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from fastapi.responses import RedirectResponse

from vibeset.config import (
    SPOTIFY_CLIENT_ID,
    SPOTIFY_CLIENT_SECRET,
    SPOTIFY_REDIRECT_URI,
)
from vibeset.core import (
    ConfigError,
    OAuthFlowError,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from vibeset.spotify import (
    DEFAULT_CALLBACK_PATH,
    SpotifyAuthError,
    SpotifySession,
    build_spotify_auth_url,
    complete_authorization,
    exchange_code_for_token,
    get_current_user_profile,
    public_user,
    start_authorization,
)

from .cookies import (
    clear_pending_cookies,
    clear_session_cookies,
    get_spotify_session,
    write_pending_cookies,
    write_session_cookies,
)

router = APIRouter()


def _require_client_id() -> str:
    if not SPOTIFY_CLIENT_ID:
        raise ConfigError(
            "Spotify Client ID not configured. "
            "Please add SPOTIFY_CLIENT_ID to your environment variables."
        )
    return SPOTIFY_CLIENT_ID


def _error_redirect(marker: str) -> RedirectResponse:
    return RedirectResponse(f"/?{urlencode({'error': marker})}", status_code=302)


@router.get("/auth")
def spotify_auth(callback: str = Query(default=DEFAULT_CALLBACK_PATH)):
    """
    Start the authorization code flow: remember state + callback path in
    short-lived cookies and redirect to Spotify.
    """
    try:
        client_id = _require_client_id()
    except ConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))

    session = start_authorization(callback)
    auth_url = build_spotify_auth_url(
        client_id=client_id,
        redirect_uri=SPOTIFY_REDIRECT_URI,
        state=session.state_token,
    )

    log_step("Redirecting to Spotify authorization...")
    response = RedirectResponse(auth_url, status_code=302)
    write_pending_cookies(response, session)
    return response


def _complete_callback(
    session: SpotifySession,
    code: Optional[str],
    state: Optional[str],
    error: Optional[str],
) -> SpotifySession:
    """
    Validate the redirect and exchange the code.

    The state check happens before any request to Spotify.
    """
    if error:
        raise OAuthFlowError(error, f"Spotify authorization failed: {error}")

    if not code or not state:
        raise OAuthFlowError(OAuthFlowError.MISSING_CODE_OR_STATE)

    if not session.state_matches(state):
        raise OAuthFlowError(OAuthFlowError.STATE_MISMATCH)

    if not SPOTIFY_CLIENT_ID or not SPOTIFY_CLIENT_SECRET:
        raise OAuthFlowError(OAuthFlowError.SERVER_CONFIG_ERROR)

    try:
        token_info = exchange_code_for_token(
            code,
            client_id=SPOTIFY_CLIENT_ID,
            client_secret=SPOTIFY_CLIENT_SECRET,
            redirect_uri=SPOTIFY_REDIRECT_URI,
        )
    except SpotifyAuthError as e:
        raise OAuthFlowError(OAuthFlowError.TOKEN_EXCHANGE_FAILED, str(e))
    except requests.RequestException as e:
        raise OAuthFlowError(OAuthFlowError.CALLBACK_ERROR, str(e))

    if not isinstance(token_info, dict) or not token_info.get("access_token"):
        raise OAuthFlowError(
            OAuthFlowError.TOKEN_EXCHANGE_FAILED, "Token response has no access_token."
        )

    # Best effort: a missing profile only hides the "logged in as" label
    try:
        profile = get_current_user_profile(token_info["access_token"])
    except (SpotifyAuthError, requests.RequestException) as e:
        log_warning(f"Could not fetch Spotify profile after login: {e}")
        profile = None

    try:
        return complete_authorization(session, token_info, profile)
    except (TypeError, ValueError) as e:
        raise OAuthFlowError(
            OAuthFlowError.CALLBACK_ERROR, f"Unusable token response: {e}"
        )


@router.get("/callback")
def spotify_callback(
    code: Optional[str] = Query(default=None),
    state: Optional[str] = Query(default=None),
    error: Optional[str] = Query(default=None),
    session: SpotifySession = Depends(get_spotify_session),
):
    """
    Spotify redirect target.

    Examples:
      - /api/spotify/callback?code=...&state=...
      - /api/spotify/callback?error=access_denied
    """
    try:
        session = _complete_callback(session, code, state, error)
    except OAuthFlowError as e:
        log_warning(f"Spotify callback rejected: {e.marker} ({e})")
        return _error_redirect(e.marker)

    log_success("Spotify authorization complete.")
    response = RedirectResponse(
        session.callback_path or DEFAULT_CALLBACK_PATH, status_code=302
    )
    write_session_cookies(response, session)
    clear_pending_cookies(response)
    return response


@router.get("/user")
def spotify_user(session: SpotifySession = Depends(get_spotify_session)) -> dict:
    """
    Report whether the stored access token is still accepted by Spotify.

    Never fails: any problem reads as "not authenticated". Expired tokens
    are not refreshed here, even when a refresh token cookie exists.
    """
    if not session.is_authenticated:
        return {"authenticated": False}

    try:
        profile = get_current_user_profile(session.access_token)
    except SpotifyAuthError as e:
        log_info(f"Stored Spotify token rejected ({e.status_code}).")
        return {"authenticated": False}
    except requests.RequestException as e:
        log_warning(f"Spotify profile check failed: {e}")
        return {"authenticated": False}

    if not isinstance(profile, dict):
        log_warning("Spotify profile response is not an object.")
        return {"authenticated": False}

    return {
        "authenticated": True,
        "user": public_user(profile),
        "cachedUser": session.user,
    }


@router.post("/logout")
def spotify_logout(response: Response) -> dict:
    clear_session_cookies(response)
    log_info("Spotify session cookies cleared.")
    return {"authenticated": False}
