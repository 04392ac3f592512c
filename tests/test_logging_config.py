"""Tests for the logger factory."""

from __future__ import annotations

import logging

from doctrail.utils import logging_config
from doctrail.utils.logging_config import configure_logging, get_logger


class TestGetLogger:
    """Tests for get_logger."""

    def test_module_names_are_kept(self) -> None:
        assert get_logger("doctrail.project").name == "doctrail.project"

    def test_foreign_names_are_namespaced(self) -> None:
        assert get_logger("host_plugin").name == "doctrail.host_plugin"

    def test_package_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger("doctrail").handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_adds_single_handler(self, monkeypatch) -> None:
        logger = logging.getLogger("doctrail")
        monkeypatch.setattr(logging_config, "_stream_handler", None)
        before = list(logger.handlers)

        try:
            configure_logging("debug")
            configure_logging(logging.INFO)

            added = [handler for handler in logger.handlers if handler not in before]
            assert len(added) == 1
            assert logger.level == logging.INFO
        finally:
            for handler in logger.handlers[:]:
                if handler not in before:
                    logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    def test_unknown_level_falls_back_to_warning(self, monkeypatch) -> None:
        logger = logging.getLogger("doctrail")
        monkeypatch.setattr(logging_config, "_stream_handler", None)
        before = list(logger.handlers)

        try:
            configure_logging("chatty")
            assert logger.level == logging.WARNING
        finally:
            for handler in logger.handlers[:]:
                if handler not in before:
                    logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
