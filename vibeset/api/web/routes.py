from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

WEB_DIR = Path(__file__).resolve().parents[2] / "web"
INDEX_FILE = WEB_DIR / "index.html"

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index() -> str:
    """
    Single-page UI; all state lives in the browser.
    """
    return INDEX_FILE.read_text(encoding="utf-8")


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}
