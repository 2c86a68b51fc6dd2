"""Short-hand logging for routers and services.

Every helper writes to the "vibeset" logger. Steps, successes and problems
carry a leading marker so a request's progress reads at a glance in the
uvicorn console:

    → Redirecting to Spotify authorization...
    ✅ Spotify authorization complete.
    ⚠️ Spotify callback rejected: invalid_state
"""

import logging
from typing import Optional

LOGGER_NAME = "vibeset"

logger = logging.getLogger(LOGGER_NAME)

# level and marker per kind of message
_KINDS = {
    "info": (logging.INFO, None),
    "step": (logging.INFO, "→"),
    "success": (logging.INFO, "✅"),
    "warning": (logging.WARNING, "⚠️"),
    "error": (logging.ERROR, "❌"),
}


def marked(kind: str, message: str) -> str:
    """
    Text as it appears in the log for `kind`.

    Example:
      marked("step", "Exchanging code") -> "→ Exchanging code"
    """
    marker: Optional[str] = _KINDS[kind][1]
    return message if marker is None else f"{marker} {message}"


def _emit(kind: str, message: str) -> None:
    level = _KINDS[kind][0]
    if logger.isEnabledFor(level):
        logger.log(level, "%s", marked(kind, message))


def log_info(message: str) -> None:
    _emit("info", message)


def log_step(message: str) -> None:
    """Work about to happen (outbound call, redirect...)."""
    _emit("step", message)


def log_success(message: str) -> None:
    _emit("success", message)


def log_warning(message: str) -> None:
    """Recovered problem: upstream refused, best-effort call failed."""
    _emit("warning", message)


def log_error(message: str) -> None:
    _emit("error", message)
