"""Configuration management for navcheck."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from navcheck.utils.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://playwright.dev/"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class AppConfig:
    """Application configuration."""

    base_url: str
    output_dir: Path
    headless: bool = True
    browser_name: str = "chromium"
    page_timeout: int = 30000  # ms
    element_timeout: int = 10000  # ms
    expect_timeout: int = 5000  # ms
    stealth: bool = False
    parallel: bool = False
    screenshots: bool = True


class ConfigLoader:
    """Loads configuration from environment variables."""

    @staticmethod
    def load() -> AppConfig:
        """Load configuration from environment.

        Raises:
            ConfigurationError: If configuration values are invalid.
        """
        load_dotenv()  # Load .env file if present

        base_url = os.environ.get("NAVCHECK_BASE_URL", DEFAULT_BASE_URL).strip()
        if not base_url:
            raise ConfigurationError("NAVCHECK_BASE_URL must not be empty")

        return AppConfig(
            base_url=base_url,
            output_dir=Path(os.environ.get("NAVCHECK_OUTPUT", "./output")),
            headless=ConfigLoader._get_bool_env("NAVCHECK_HEADLESS", True),
            browser_name=os.environ.get("NAVCHECK_BROWSER", "chromium"),
            page_timeout=ConfigLoader._get_timeout_env(
                "NAVCHECK_PAGE_TIMEOUT", 30000
            ),
            element_timeout=ConfigLoader._get_timeout_env(
                "NAVCHECK_ELEMENT_TIMEOUT", 10000
            ),
            expect_timeout=ConfigLoader._get_timeout_env(
                "NAVCHECK_EXPECT_TIMEOUT", 5000
            ),
            stealth=ConfigLoader._get_bool_env("NAVCHECK_STEALTH", False),
            parallel=ConfigLoader._get_bool_env("NAVCHECK_PARALLEL", False),
            screenshots=ConfigLoader._get_bool_env("NAVCHECK_SCREENSHOTS", True),
        )

    @staticmethod
    def _get_int_env(name: str, default: int) -> int:
        """Get an integer environment variable.

        Args:
            name: The environment variable name.
            default: The default value if not set.

        Returns:
            The integer value.

        Raises:
            ConfigurationError: If the value is not a valid integer.
        """
        value = os.environ.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for {name}: '{value}' is not a valid integer"
            ) from e

    @staticmethod
    def _get_timeout_env(name: str, default: int) -> int:
        """Get a timeout in milliseconds, which must be positive."""
        value = ConfigLoader._get_int_env(name, default)
        if value <= 0:
            raise ConfigurationError(
                f"Invalid value for {name}: timeout must be positive, got {value}"
            )
        return value

    @staticmethod
    def _get_bool_env(name: str, default: bool) -> bool:
        """Get a boolean environment variable.

        Accepts 1/0, true/false, yes/no and on/off (case-insensitive).

        Raises:
            ConfigurationError: If the value is not a recognised boolean.
        """
        value = os.environ.get(name)
        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigurationError(
            f"Invalid value for {name}: '{value}' is not a valid boolean"
        )
