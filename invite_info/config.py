import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_API_BASE_URL = "https://discord.com/api/v9"
DEFAULT_USER_AGENT = "InviteInfo/1.0"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_env(name: str, *, required: bool = True, default: Optional[str] = None) -> Optional[str]:
    """Read an environment variable and optionally enforce its presence."""
    value = os.getenv(name, default)
    if value is None and required:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _parse_optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid number value: {raw}") from exc


def _parse_bool(raw: Optional[str], default: bool = False) -> bool:
    if raw is None or raw == "":
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    discord_api_base_url: str
    lookup_timeout_seconds: Optional[float]
    lookup_user_agent: str
    api_host: str
    api_port: int
    rate_limit: str
    rate_limit_enabled: bool
    log_dir: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        settings = cls(
            discord_api_base_url=_get_env("DISCORD_API_BASE_URL", required=False, default=DEFAULT_API_BASE_URL),
            lookup_timeout_seconds=_parse_optional_float(_get_env("LOOKUP_TIMEOUT_SECONDS", required=False)),
            lookup_user_agent=_get_env("LOOKUP_USER_AGENT", required=False, default=DEFAULT_USER_AGENT),
            api_host=_get_env("API_HOST", required=False, default="0.0.0.0"),
            api_port=int(_get_env("API_PORT", required=False, default="8000")),
            rate_limit=_get_env("RATE_LIMIT", required=False, default="30/minute"),
            rate_limit_enabled=_parse_bool(_get_env("RATE_LIMIT_ENABLED", required=False), default=True),
            log_dir=_get_env("LOG_DIR", required=False, default="logs"),
            log_level=_get_env("LOG_LEVEL", required=False, default="INFO").upper(),
        )

        logger.debug("Loaded settings: %s", settings)
        return settings

    def validate(self) -> list[str]:
        """Validate settings and return list of errors (empty if valid)."""
        errors = []

        if not self.discord_api_base_url.startswith(("http://", "https://")):
            errors.append(f"DISCORD_API_BASE_URL must be an http(s) URL (got {self.discord_api_base_url!r})")

        if self.lookup_timeout_seconds is not None and self.lookup_timeout_seconds <= 0:
            errors.append("LOOKUP_TIMEOUT_SECONDS must be > 0 when set")

        if not self.lookup_user_agent:
            errors.append("LOOKUP_USER_AGENT must not be empty")

        if not (1 <= self.api_port <= 65535):
            errors.append(f"API_PORT must be between 1 and 65535 (got {self.api_port})")

        if self.rate_limit_enabled and "/" not in self.rate_limit:
            errors.append(f"RATE_LIMIT must look like '30/minute' (got {self.rate_limit!r})")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)} (got {self.log_level!r})")

        return errors


def validate_settings(settings: Settings) -> None:
    """Validate settings and raise RuntimeError if invalid."""
    errors = settings.validate()
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in errors)
        logger.error(error_msg)
        raise RuntimeError(error_msg)


settings = Settings.from_env()
