"""
Tests unitaires pour la configuration du logging.
"""

import logging

import pytest
import structlog

from portfolio_backup.infrastructure.logging.config import (
    MASK,
    build_processors,
    configure_logging,
    mask_secrets,
)


class TestMaskSecrets:
    """Tests pour le processor mask_secrets."""

    def test_masks_sensitive_keys(self):
        """Les cles sensibles sont masquees, casse indifferente."""
        event = mask_secrets(None, "info", {
            "event": "user_restored",
            "password": "hash",
            "Authorization": "Bearer abc",
            "table": "users",
        })

        assert event["password"] == MASK
        assert event["Authorization"] == MASK
        assert event["table"] == "users"
        assert event["event"] == "user_restored"


class TestBuildProcessors:
    """Tests pour build_processors."""

    def test_json_renderer_in_production(self):
        """Mode JSON: rendu JSON en dernier."""
        processors = build_processors(json_logs=True)

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert mask_secrets in processors

    def test_console_renderer_in_development(self):
        """Mode dev: rendu console en dernier."""
        processors = build_processors(json_logs=False)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_unknown_level_rejected(self):
        """Un niveau inconnu leve ValueError."""
        with pytest.raises(ValueError):
            configure_logging(log_level="VERBOSE")

    def test_noisy_loggers_capped_at_warning(self):
        """apscheduler et sqlalchemy restent au moins a WARNING."""
        configure_logging(log_level="debug")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("apscheduler").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_level_applied(self):
        """Le niveau racine suit la configuration."""
        configure_logging(log_level="ERROR")

        assert logging.getLogger().level == logging.ERROR
        assert logging.getLogger("apscheduler").level == logging.ERROR
