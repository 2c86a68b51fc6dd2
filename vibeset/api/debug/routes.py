from fastapi import APIRouter

from vibeset.config import OPENAI_API_KEY

router = APIRouter()


@router.get("/env")
def debug_env() -> dict:
    """
    Report which credentials are configured, never their values.
    """
    return {"hasOpenAIKey": bool(OPENAI_API_KEY)}
