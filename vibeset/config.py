from dotenv import load_dotenv
import os

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# OpenAI (REQUIRED for /api/ai/plan)
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TEMPERATURE = 0.9

# Spotify credentials (REQUIRED for login)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")

# Public URL of this app, used to build the default redirect URI
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000")
SPOTIFY_REDIRECT_URI = os.getenv(
    "SPOTIFY_REDIRECT_URI", f"{PUBLIC_BASE_URL}/api/spotify/callback"
)

# Spotify API constants
SPOTIFY_AUTH_URL = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"
SPOTIFY_HTTP_TIMEOUT = float(os.getenv("SPOTIFY_HTTP_TIMEOUT", "10"))

SCOPES = [
    "user-read-private",
    "user-read-email",
    "playlist-modify-public",
    "playlist-modify-private",
    "user-top-read",
]

# Session cookies
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "false").lower() in ("1", "true", "yes")

STATE_COOKIE = "spotify_oauth_state"
CALLBACK_COOKIE = "spotify_oauth_callback"
ACCESS_TOKEN_COOKIE = "spotify_access_token"
REFRESH_TOKEN_COOKIE = "spotify_refresh_token"
USER_COOKIE = "spotify_user"

PENDING_COOKIE_MAX_AGE = 600
ACCESS_TOKEN_DEFAULT_MAX_AGE = 3600
REFRESH_TOKEN_MAX_AGE = 60 * 60 * 24 * 365  # 1 year
USER_COOKIE_MAX_AGE = 60 * 60 * 24 * 30  # 30 days

# Mock playlist naming
PLAYLIST_NAME_PREFIX = "AI Set: "
PLAYLIST_NAME_DEFAULT = "Custom Mix"
PLAYLIST_NAME_MAX_CHARS = 40
MOCK_PLAYLIST_URL_BASE = "https://open.spotify.com/playlist"
