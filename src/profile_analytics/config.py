import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    relay_url: str = "https://corsproxy.io/?"
    api_url: str = "https://api.github.com"
    request_timeout: float = 30.0
    synthetic_delay: float = 1.0
    default_mode: str = "synthetic"
    log_level: str = "INFO"


def load_settings(dotenv: bool = True) -> Settings:
    """Build settings from the environment, optionally reading a .env file first."""
    if dotenv:
        load_dotenv()
    defaults = Settings()
    mode = os.getenv("PROFILE_DEFAULT_MODE", defaults.default_mode).strip().lower()
    if mode not in ("synthetic", "remote"):
        logger.warning("Ignoring invalid PROFILE_DEFAULT_MODE=%r", mode)
        mode = defaults.default_mode
    return Settings(
        # an empty relay is allowed and means "call the API directly"
        relay_url=os.getenv("PROFILE_RELAY_URL", defaults.relay_url).strip(),
        api_url=os.getenv("GITHUB_API_URL", defaults.api_url).strip() or defaults.api_url,
        request_timeout=_env_float("GITHUB_REQUEST_TIMEOUT", defaults.request_timeout),
        synthetic_delay=_env_float("SYNTHETIC_DELAY_SECONDS", defaults.synthetic_delay),
        default_mode=mode,
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).strip().upper() or defaults.log_level,
    )
