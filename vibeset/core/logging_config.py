import logging
import sys
from typing import Optional, Union

from vibeset.config import LOG_LEVEL


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging for the web app.

    - Logs go to stdout
    - Level comes from LOG_LEVEL unless given explicitly
    - Safe to call twice: uvicorn may already have installed handlers
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(handler)
    root.setLevel(level)

    # requests/openai transport chatter
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
