from fastapi import FastAPI

from vibeset import __version__
from vibeset.api.ai.routes import router as ai_router
from vibeset.api.debug.routes import router as debug_router
from vibeset.api.mock.routes import router as mock_router
from vibeset.api.spotify.routes import router as spotify_router
from vibeset.api.web.routes import router as web_router
from vibeset.core import configure_logging

configure_logging()

app = FastAPI(
    title="Vibeset API",
    version=__version__,
    description="Turn a free-text vibe into an AI playlist concept with mock tracks.",
)

# Page + health
app.include_router(web_router, tags=["web"])

# AI + mock playlist routes
app.include_router(ai_router, prefix="/api/ai", tags=["ai"])
app.include_router(mock_router, prefix="/api/mock", tags=["mock"])

# Spotify login
app.include_router(spotify_router, prefix="/api/spotify", tags=["spotify"])

app.include_router(debug_router, prefix="/api/debug", tags=["debug"])
