from typing import Optional

from fastapi import APIRouter, HTTPException
from openai import OpenAIError

from vibeset.ai import request_playlist_plan
from vibeset.api.schemas import PromptRequest
from vibeset.core import (
    ConfigError,
    IncompletePlanError,
    InvalidInput,
    UpstreamFormatError,
    log_error,
    log_success,
)

router = APIRouter()


@router.post("/plan")
def ai_plan(payload: Optional[PromptRequest] = None) -> dict:
    """
    Ask the AI model for a playlist plan (name, vibes, description).

    The plan is returned exactly as the model produced it.
    """
    prompt = payload.prompt if payload else None

    try:
        plan = request_playlist_plan(prompt)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConfigError as e:
        log_error(str(e))
        raise HTTPException(status_code=500, detail=str(e))
    except UpstreamFormatError as e:
        raise HTTPException(status_code=500, detail={"error": str(e), "raw": e.raw})
    except IncompletePlanError as e:
        raise HTTPException(status_code=500, detail={"error": str(e), "plan": e.plan})
    except OpenAIError as e:
        log_error(f"OpenAI request failed: {e}")
        raise HTTPException(status_code=502, detail="AI provider request failed.")

    log_success(f"Playlist plan ready: {plan.get('playlistName')!r}")
    return plan
