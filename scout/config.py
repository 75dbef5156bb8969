# scout/config.py
import os
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_api_key() -> Optional[str]:
    # Read lazily so a missing key never crashes import time
    return os.getenv("OPENAI_API_KEY") or None


def get_model() -> str:
    # Default to a low-cost model
    return os.getenv("OPENAI_MODEL", "gpt-4o-mini")


def get_log_level() -> int:
    # Unknown names fall back to INFO instead of failing page startup
    level = getattr(logging, os.getenv("SCOUT_LOG_LEVEL", "INFO").strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Install a basic handler once; Streamlit reruns the script on every interaction."""
    level = get_log_level()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("scout").setLevel(level)
