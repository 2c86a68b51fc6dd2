from typing import Any, Optional

from pydantic import BaseModel, field_validator


def scalar_to_text(value: Any) -> Any:
    """
    Render JSON numbers and booleans the way a browser would print them.

    Example:
      scalar_to_text(7)     -> "7"
      scalar_to_text(7.0)   -> "7"
      scalar_to_text(True)  -> "true"
      scalar_to_text(None)  -> None
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


class PromptRequest(BaseModel):
    """Body of the endpoints taking a free-text vibe."""

    prompt: Optional[str] = None

    @field_validator("prompt", mode="before")
    @classmethod
    def prompt_as_text(cls, value: Any) -> Any:
        return scalar_to_text(value)
