"""
Tests for the logging configuration.
"""

import logging
from collections.abc import Iterator

import pytest

from gateway.shared.logging import REWRITE_LOGGER, configure_logging


@pytest.fixture
def restore_logging() -> Iterator[None]:
    yield
    configure_logging()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_root_level_follows_setting(self, restore_logging: None) -> None:
        configure_logging(level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, restore_logging: None) -> None:
        configure_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_rewrites_logged_below_global_level(self, restore_logging: None) -> None:
        configure_logging(level="WARNING", log_rewrites=True)
        rewrite_logger = logging.getLogger(f"{REWRITE_LOGGER}.normalize_response")
        assert rewrite_logger.isEnabledFor(logging.DEBUG)
        assert not logging.getLogger("gateway.main").isEnabledFor(logging.DEBUG)

    def test_rewrites_follow_global_level_by_default(
        self, restore_logging: None
    ) -> None:
        configure_logging(level="WARNING")
        rewrite_logger = logging.getLogger(f"{REWRITE_LOGGER}.normalize_response")
        assert not rewrite_logger.isEnabledFor(logging.DEBUG)
