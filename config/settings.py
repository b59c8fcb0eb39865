"""
Browser Suite Settings

Typed settings for the e2e suite, built from the layered YAML config and
then overridden by environment variables.

Usage:
    from config.settings import load_settings

    settings = load_settings()
    settings.base_url
    settings.viewport  # {"width": 1280, "height": 720}

Environment variables:
    E2E_ENV        Config environment (development, ci)
    E2E_BASE_URL   Store URL
    E2E_HEADLESS   true/false
    E2E_SLOW_MO    Milliseconds between actions
    E2E_BROWSER    chromium, firefox or webkit
"""

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .config_loader import CONFIG_DIR, ConfigLoader

logger = logging.getLogger(__name__)

# Base directory for relative paths
BASE_DIR = CONFIG_DIR.parent

BROWSERS = ("chromium", "firefox", "webkit")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise ConfigError(f"{name}: '{value}' is not a valid boolean")


def _parse_int(name: str, value: Any, min_value: int = 0) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name}: '{value}' is not a valid integer")
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name}: '{value}' is not a valid integer")
    if parsed < min_value:
        raise ConfigError(f"{name}: value {parsed} is below minimum {min_value}")
    return parsed


@dataclass
class E2ESettings:
    """Settings for one browser suite run."""

    base_url: str = "https://www.saucedemo.com"
    default_timeout: int = 5000
    navigation_timeout: int = 30000
    viewport: Dict[str, int] = field(default_factory=lambda: {"width": 1280, "height": 720})
    headless: bool = True
    slow_mo: int = 0
    browser: str = "chromium"
    screenshot_on_failure: bool = True
    record_video: bool = False
    artifacts_dir: Path = BASE_DIR / "artifacts"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "E2ESettings":
        """Create from a merged config dictionary, validating every field."""
        defaults = cls()

        base_url = str(data.get("base_url", defaults.base_url)).rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(f"base_url: '{base_url}' must start with http:// or https://")

        timeouts = data.get("timeouts", {}) or {}
        viewport = data.get("viewport", {}) or {}

        browser = str(data.get("browser", defaults.browser)).lower()
        if browser not in BROWSERS:
            raise ConfigError(f"browser: '{browser}' is not a valid choice. Must be one of: {BROWSERS}")

        log_level = str(data.get("log_level", defaults.log_level)).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level: '{log_level}' is not a valid choice. Must be one of: {LOG_LEVELS}")

        artifacts_dir = Path(data.get("artifacts_dir", defaults.artifacts_dir))
        if not artifacts_dir.is_absolute():
            artifacts_dir = BASE_DIR / artifacts_dir

        return cls(
            base_url=base_url,
            default_timeout=_parse_int(
                "timeouts.default", timeouts.get("default", defaults.default_timeout), 1
            ),
            navigation_timeout=_parse_int(
                "timeouts.navigation", timeouts.get("navigation", defaults.navigation_timeout), 1
            ),
            viewport={
                "width": _parse_int("viewport.width", viewport.get("width", 1280), 1),
                "height": _parse_int("viewport.height", viewport.get("height", 720), 1),
            },
            headless=_parse_bool("headless", data.get("headless", defaults.headless)),
            slow_mo=_parse_int("slow_mo", data.get("slow_mo", defaults.slow_mo)),
            browser=browser,
            screenshot_on_failure=_parse_bool(
                "screenshot_on_failure", data.get("screenshot_on_failure", defaults.screenshot_on_failure)
            ),
            record_video=_parse_bool("record_video", data.get("record_video", defaults.record_video)),
            artifacts_dir=artifacts_dir,
            log_level=log_level,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["artifacts_dir"] = str(self.artifacts_dir)
        return data


# Environment variable -> config key
ENV_OVERRIDES = {
    "E2E_BASE_URL": "base_url",
    "E2E_HEADLESS": "headless",
    "E2E_SLOW_MO": "slow_mo",
    "E2E_BROWSER": "browser",
}


def load_settings(
    environment: Optional[str] = None,
    config_dir: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None,
) -> E2ESettings:
    """
    Build settings for the given environment.

    Args:
        environment: Config environment, defaults to $E2E_ENV or 'development'
        config_dir: Directory holding base/ and environments/
        environ: Mapping to read overrides from (defaults to os.environ)

    Raises:
        ConfigError if any value is invalid
    """
    environ = os.environ if environ is None else environ
    environment = environment or environ.get("E2E_ENV", "development")

    data = ConfigLoader(config_dir, environment).load("e2e")

    for var_name, key in ENV_OVERRIDES.items():
        if var_name in environ:
            logger.debug(f"{var_name} overrides {key}")
            data[key] = environ[var_name]

    settings = E2ESettings.from_dict(data)
    logger.info(f"Loaded {environment} settings for {settings.base_url} ({settings.browser})")
    return settings
