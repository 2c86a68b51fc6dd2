"""
AI playlist plan requester using OpenAI.

Sends the user's vibe to a chat-completion model with a strict JSON
instruction and validates the returned plan:

    {"playlistName": str, "vibes": [str, ...], "description": str}

One outbound call per request, no retry and no caching.
"""

import json
from typing import Any, Dict, List, Optional

from openai import OpenAI

from vibeset.config import OPENAI_API_KEY, OPENAI_MODEL, OPENAI_TEMPERATURE
from vibeset.core.errors import (
    ConfigError,
    IncompletePlanError,
    InvalidInput,
    UpstreamFormatError,
)
from vibeset.core.logging_utils import log_step, log_warning

SYSTEM_INSTRUCTION = """You generate playlist plans. Return STRICT JSON ONLY:
{
  "playlistName": string,
  "vibes": string[],   // 3-6 short tags
  "description": string // <= 180 chars
}
No markdown. No extra keys."""


def _get_openai_client() -> OpenAI:
    if not OPENAI_API_KEY:
        raise ConfigError(
            "OpenAI API key not configured. Please set OPENAI_API_KEY environment variable."
        )
    return OpenAI(api_key=OPENAI_API_KEY)


def build_messages(prompt: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_INSTRUCTION},
        {"role": "user", "content": f"User prompt: {prompt}"},
    ]


def parse_plan(text: str) -> Dict[str, Any]:
    """
    Parse and validate the model output.

    Raises UpstreamFormatError if `text` is not JSON, IncompletePlanError if
    the object lacks a name, a description, or a `vibes` list.
    """
    try:
        plan = json.loads(text)
    except json.JSONDecodeError:
        raise UpstreamFormatError("AI returned invalid JSON", raw=text)

    if (
        not isinstance(plan, dict)
        or not plan.get("playlistName")
        or not isinstance(plan.get("vibes"), list)
        or not plan.get("description")
    ):
        raise IncompletePlanError("AI returned incomplete plan", plan=plan)

    return plan


def request_playlist_plan(
    prompt: Optional[str],
    client: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Ask the model for a playlist plan matching `prompt`.

    `client` is anything exposing `chat.completions.create` (an OpenAI
    client by default). The returned dict is the parsed plan, unmodified.
    """
    prompt = (prompt or "").strip()
    if not prompt:
        raise InvalidInput("Missing prompt")

    if client is None:
        client = _get_openai_client()

    log_step(f"Requesting playlist plan from {OPENAI_MODEL}...")
    resp = client.chat.completions.create(
        model=OPENAI_MODEL,
        temperature=OPENAI_TEMPERATURE,
        messages=build_messages(prompt),
        response_format={"type": "json_object"},
    )

    text = "{}"
    if resp.choices:
        text = resp.choices[0].message.content or "{}"

    try:
        return parse_plan(text)
    except (UpstreamFormatError, IncompletePlanError) as e:
        log_warning(f"Unusable playlist plan from {OPENAI_MODEL}: {e}")
        raise
