"""Application settings from environment variables.

Centralized environment variable parsing and validation. Values are read
once at startup and passed explicitly to the components that need them.
"""

import logging
import os
from dataclasses import dataclass, field

from ssh_runner.models.platform import DEFAULT_WINDOWS_SSH_EXE

logger = logging.getLogger(__name__)

PLATFORM_CHOICES = ("auto", "native", "shell")
TRANSPORT_CHOICES = ("stdio", "http")


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all SSH_RUNNER_* env vars.
    """

    # SSH client
    ssh_exe: str = field(default=DEFAULT_WINDOWS_SSH_EXE)
    platform: str = field(default="auto")
    command_timeout: float | None = field(default=None)
    escape_quotes: bool = field(default=False)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with values from environment
        """
        settings = cls(
            ssh_exe=os.getenv("SSH_RUNNER_SSH_EXE", "").strip() or DEFAULT_WINDOWS_SSH_EXE,
            platform=cls._get_choice("SSH_RUNNER_PLATFORM", PLATFORM_CHOICES, "auto"),
            command_timeout=cls._get_timeout("SSH_RUNNER_COMMAND_TIMEOUT"),
            escape_quotes=cls._get_bool("SSH_RUNNER_ESCAPE_QUOTES", False),
            log_level=os.getenv("SSH_RUNNER_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("SSH_RUNNER_LOG_COLORS", True),
            transport=cls._get_choice("SSH_RUNNER_TRANSPORT", TRANSPORT_CHOICES, "stdio"),
            http_host=os.getenv("SSH_RUNNER_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("SSH_RUNNER_HTTP_PORT", 8000),
        )
        logger.debug(
            "Settings loaded: platform=%s, ssh_exe=%s, command_timeout=%s, "
            "escape_quotes=%s, transport=%s",
            settings.platform,
            settings.ssh_exe,
            settings.command_timeout,
            settings.escape_quotes,
            settings.transport,
        )
        return settings

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_timeout(key: str) -> float | None:
        """Get an optional deadline in seconds.

        Unset, empty, invalid, or non-positive values all mean "no deadline".
        """
        value = os.getenv(key, "").strip()
        if not value:
            return None

        try:
            seconds = float(value)
        except ValueError:
            logger.warning("Invalid timeout for %s: %s, using no timeout", key, value)
            return None

        return seconds if seconds > 0 else None

    @staticmethod
    def _get_choice(key: str, choices: tuple[str, ...], default: str) -> str:
        """Get a value restricted to ``choices``, falling back to ``default``."""
        value = os.getenv(key, "").strip().lower()
        if not value:
            return default
        if value not in choices:
            logger.warning(
                "Invalid value for %s: %s (expected one of %s), using default %s",
                key,
                value,
                ", ".join(choices),
                default,
            )
            return default
        return value
