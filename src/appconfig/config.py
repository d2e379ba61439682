"""Runtime settings for appconfig's own diagnostics.

These only control logging of the demo program. They never overlay values
of the JSON configuration being served.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _log_level(name: str) -> str:
    """Return the level name, or WARNING when logging does not know it."""
    name = name.upper()
    return name if isinstance(logging.getLevelName(name), int) else "WARNING"


class Config:
    """Minimal configuration"""

    DEBUG = os.getenv("APPCONFIG_DEBUG", "false").lower() == "true"

    LOG_LEVEL = _log_level(os.getenv("APPCONFIG_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING"))
    LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


config = Config()
