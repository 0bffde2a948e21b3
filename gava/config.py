"""
Configuration for the Gava client.

Settings are read from the environment, with a .env file loaded first if
one exists.
"""
import os
import logging
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .transport import DEFAULT_TIMEOUT

# Set up logging
logger = logging.getLogger('gava.config')

DEFAULT_WEBHOOK_PATH = "/gava/webhook"


class Settings:
    """Immutable client settings: Gava base URL, shared secret and timeout"""

    __slots__ = ("_api_url", "_secret", "_timeout", "_webhook_path")

    def __init__(
            self,
            api_url: str,
            secret: str,
            timeout: float = DEFAULT_TIMEOUT,
            webhook_path: str = DEFAULT_WEBHOOK_PATH
    ) -> None:
        self._api_url = (api_url or "").rstrip("/")
        self._secret = secret or ""
        self._timeout = timeout
        self._webhook_path = webhook_path

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def webhook_path(self) -> str:
        return self._webhook_path

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate that critical configuration is present"""
        missing = []

        if not self._api_url:
            missing.append("GAVA_API_URL")
        if not self._secret:
            missing.append("GAVA_SECRET")

        return len(missing) == 0, missing

    def __repr__(self) -> str:
        return f"Settings(api_url={self._api_url!r}, timeout={self._timeout!r})"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Path of a .env file to load; the default lookup is used if None

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a required variable is missing or invalid
    """
    load_dotenv(env_file)

    raw_timeout = os.getenv("GAVA_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(f"GAVA_REQUEST_TIMEOUT must be a number, got {raw_timeout!r}")

    settings = Settings(
        api_url=os.getenv("GAVA_API_URL", ""),
        secret=os.getenv("GAVA_SECRET", ""),
        timeout=timeout,
        webhook_path=os.getenv("GAVA_WEBHOOK_PATH", DEFAULT_WEBHOOK_PATH)
    )

    is_valid, missing = settings.validate()
    if not is_valid:
        logger.warning(f"Configuration is missing these critical items: {missing}")
        raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")

    return settings
