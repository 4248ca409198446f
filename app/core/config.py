"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    BUDDYBUILD_ACCESS_KEY  — Bearer token for the BuddyBuild API (required)
    BUDDYBUILD_APP_ID      — Application whose builds are listed (default: Fennec)
    BUDDYBUILD_API_URL     — API base URL (default: https://api.buddybuild.com)
    BUDDYBUILD_TIMEOUT     — Upstream request timeout in seconds (default: 30)
    LOG_LEVEL              — Root log level name (default: INFO)
    LOG_DIR                — Enables a daily log file in this directory
    HOST / PORT            — Bind address for `python main.py`

The access key is read per request through load_config(), not at import.
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from app.core.constants import (
    APPLICATION_NAME,
    BUDDYBUILD_API_URL,
    DEFAULT_TIMEOUT,
    FENNEC_APP_ID,
)
from app.core.errors import ConfigurationError

load_dotenv()

ACCESS_KEY_ENV = "BUDDYBUILD_ACCESS_KEY"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR")
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", 8000))


@dataclass(frozen=True)
class BuddyBuildConfig:
    """Everything the upstream client needs for one request."""
    access_token: str
    app_id: str = FENNEC_APP_ID
    application_name: str = APPLICATION_NAME
    api_base_url: str = BUDDYBUILD_API_URL
    timeout: float = DEFAULT_TIMEOUT


def load_config() -> BuddyBuildConfig:
    """
    Resolve the upstream configuration from the current environment.

    Raises ConfigurationError if the access key is unset or the timeout is
    not a number.
    """
    token = os.getenv(ACCESS_KEY_ENV, "").strip()
    if not token:
        raise ConfigurationError(f"{ACCESS_KEY_ENV} is not set")

    raw_timeout = os.getenv("BUDDYBUILD_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ConfigurationError(f"BUDDYBUILD_TIMEOUT is not a number: {raw_timeout!r}") from exc

    return BuddyBuildConfig(
        access_token=token,
        app_id=os.getenv("BUDDYBUILD_APP_ID", FENNEC_APP_ID),
        api_base_url=os.getenv("BUDDYBUILD_API_URL", BUDDYBUILD_API_URL).rstrip("/"),
        timeout=timeout,
    )
