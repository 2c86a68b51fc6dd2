"""Public façade for the vibeset.ai package."""

from .plan import (
    SYSTEM_INSTRUCTION,
    build_messages,
    parse_plan,
    request_playlist_plan,
)

__all__ = [
    "SYSTEM_INSTRUCTION",
    "build_messages",
    "parse_plan",
    "request_playlist_plan",
]
