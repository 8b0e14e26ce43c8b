"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back to ``default``."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return float(value)


@dataclass(frozen=True)
class ShakeDefaults:
    """Default envelope settings for newly constructed shakes."""

    amplitude: float = field(default_factory=lambda: _env_float("SHAKE_AMPLITUDE", 1.0))
    frequency: float = field(default_factory=lambda: _env_float("SHAKE_FREQUENCY", 1.0))
    fade_in_time: float = field(
        default_factory=lambda: _env_float("SHAKE_FADE_IN_TIME", 1.0)
    )
    fade_out_time: float = field(
        default_factory=lambda: _env_float("SHAKE_FADE_OUT_TIME", 1.0)
    )
    sustain_time: float = field(
        default_factory=lambda: _env_float("SHAKE_SUSTAIN_TIME", 0.0)
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    # Validates time constants on every update when enabled
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    shake: ShakeDefaults = field(default_factory=ShakeDefaults)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def configure_logging(logging_config: LoggingConfig | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Only the ``shake`` logger is touched; the root logger is left to the
    host application.

    Args:
        logging_config: Settings to apply (defaults to the global config)

    Returns:
        The configured package logger
    """
    logging_config = logging_config or config.logging
    package_logger = logging.getLogger("shake")
    package_logger.setLevel(logging_config.level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(logging_config.format))
        package_logger.addHandler(handler)

    return package_logger


# Global configuration instance
config = AppConfig()
