"""Tests for configuration classes."""

import logging
import os
from unittest.mock import patch

import pytest


class TestShakeDefaults:
    """Tests for ShakeDefaults."""

    def test_defaults_without_env(self):
        """Test the documented defaults apply when no env vars are set."""
        with patch.dict(os.environ, {}, clear=True):
            from shake.config import ShakeDefaults

            defaults = ShakeDefaults()

            assert defaults.amplitude == 1.0
            assert defaults.frequency == 1.0
            assert defaults.fade_in_time == 1.0
            assert defaults.fade_out_time == 1.0
            assert defaults.sustain_time == 0.0

    def test_env_overrides(self):
        """Test env vars override defaults."""
        env = {
            "SHAKE_AMPLITUDE": "3.5",
            "SHAKE_FREQUENCY": "0.2",
            "SHAKE_FADE_IN_TIME": "0.1",
            "SHAKE_FADE_OUT_TIME": "2",
            "SHAKE_SUSTAIN_TIME": "0.5",
        }
        with patch.dict(os.environ, env):
            from shake.config import ShakeDefaults

            defaults = ShakeDefaults()

            assert defaults.amplitude == 3.5
            assert defaults.frequency == 0.2
            assert defaults.fade_in_time == 0.1
            assert defaults.fade_out_time == 2.0
            assert defaults.sustain_time == 0.5

    def test_blank_env_uses_default(self):
        """Test an empty env var falls back to the default."""
        with patch.dict(os.environ, {"SHAKE_AMPLITUDE": "  "}):
            from shake.config import ShakeDefaults

            assert ShakeDefaults().amplitude == 1.0

    def test_invalid_env_raises(self):
        """Test a non-numeric env var is rejected."""
        with patch.dict(os.environ, {"SHAKE_FREQUENCY": "fast"}):
            from shake.config import ShakeDefaults

            with pytest.raises(ValueError):
                ShakeDefaults()

    def test_shake_uses_config_defaults(self):
        """Test new shakes pick up the global defaults."""
        from shake.config import AppConfig, ShakeDefaults
        from shake.shake import Shake

        with patch.dict(os.environ, {"SHAKE_AMPLITUDE": "4"}):
            patched = AppConfig(shake=ShakeDefaults())

        with patch("shake.shake.config", patched):
            assert Shake().amplitude == 4.0
            assert Shake(amplitude=2.0).amplitude == 2.0


class TestAppConfig:
    """Tests for AppConfig."""

    def test_debug_default_off(self):
        """Test debug is off unless enabled."""
        with patch.dict(os.environ, {}, clear=True):
            from shake.config import AppConfig

            assert AppConfig().debug is False

    def test_debug_from_env(self):
        """Test DEBUG=true enables debug mode."""
        with patch.dict(os.environ, {"DEBUG": "True"}):
            from shake.config import AppConfig

            assert AppConfig().debug is True

    def test_debug_reaches_shake(self):
        """Test shakes inherit the debug flag."""
        from shake.config import AppConfig
        from shake.shake import Shake

        with patch.dict(os.environ, {"DEBUG": "true"}):
            patched = AppConfig()

        with patch("shake.shake.config", patched):
            assert Shake().debug is True


class TestLogging:
    """Tests for logging configuration."""

    def test_log_level_from_env(self):
        """Test LOG_LEVEL is read and upper-cased."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            from shake.config import LoggingConfig

            assert LoggingConfig().level == "DEBUG"

    def test_configure_logging(self):
        """Test the package logger gets the configured level and one handler."""
        from shake.config import LoggingConfig, configure_logging

        package_logger = configure_logging(LoggingConfig(level="INFO"))
        configure_logging(LoggingConfig(level="INFO"))

        assert package_logger is logging.getLogger("shake")
        assert package_logger.level == logging.INFO
        assert len(package_logger.handlers) == 1
