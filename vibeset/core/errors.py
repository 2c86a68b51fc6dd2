"""Error taxonomy shared by the domain modules.

Domain code raises these; the FastAPI routers translate them into JSON
error bodies or OAuth error redirects.
"""

from typing import Any, Dict, Optional


class VibesetError(Exception):
    """Base class for all application errors."""


class InvalidInput(VibesetError):
    """Client-supplied data failed validation (HTTP 400)."""


class ConfigError(VibesetError):
    """A required credential or environment value is missing (HTTP 500)."""


class UpstreamFormatError(VibesetError):
    """The AI provider returned content that is not valid JSON."""

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


class IncompletePlanError(VibesetError):
    """The AI provider returned JSON lacking required plan fields."""

    def __init__(self, message: str, plan: Any) -> None:
        super().__init__(message)
        self.plan = plan


class OAuthFlowError(VibesetError):
    """
    A step of the Spotify OAuth callback failed.

    `reason` is one of OAUTH_ERROR_MARKERS' keys; `marker` is the value put
    in the `?error=` query parameter of the landing page.
    """

    STATE_MISMATCH = "state_mismatch"
    MISSING_CODE_OR_STATE = "missing_code_or_state"
    TOKEN_EXCHANGE_FAILED = "token_exchange_failed"
    SERVER_CONFIG_ERROR = "server_config_error"
    CALLBACK_ERROR = "callback_error"

    def __init__(self, reason: str, message: Optional[str] = None) -> None:
        super().__init__(message or reason)
        self.reason = reason

    @property
    def marker(self) -> str:
        return OAUTH_ERROR_MARKERS.get(self.reason, self.reason)


OAUTH_ERROR_MARKERS: Dict[str, str] = {
    OAuthFlowError.STATE_MISMATCH: "invalid_state",
    OAuthFlowError.MISSING_CODE_OR_STATE: "missing_code_or_state",
    OAuthFlowError.TOKEN_EXCHANGE_FAILED: "token_exchange_failed",
    OAuthFlowError.SERVER_CONFIG_ERROR: "server_config_error",
    OAuthFlowError.CALLBACK_ERROR: "callback_error",
}
