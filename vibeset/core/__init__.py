"""Public façade for the vibeset.core package.

This module exposes logging helpers, the error taxonomy, and base models
that are safe to import from other packages. Callers should import these
cross-cutting concerns from this façade instead of the internal submodules.
"""

from .errors import (
    OAUTH_ERROR_MARKERS,
    ConfigError,
    IncompletePlanError,
    InvalidInput,
    OAuthFlowError,
    UpstreamFormatError,
    VibesetError,
)
from .logging_config import configure_logging
from .logging_utils import (
    log_error,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from .models import CreatedPlaylist, GeneratedPlaylist, Track

__all__ = [
    "configure_logging",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "VibesetError",
    "InvalidInput",
    "ConfigError",
    "UpstreamFormatError",
    "IncompletePlanError",
    "OAuthFlowError",
    "OAUTH_ERROR_MARKERS",
    "Track",
    "GeneratedPlaylist",
    "CreatedPlaylist",
]
