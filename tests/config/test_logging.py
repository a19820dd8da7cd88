"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from quickadd.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Put the root and quickadd loggers back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    qa_level = logging.getLogger("quickadd").level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("quickadd").setLevel(qa_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("quickadd").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger("quickadd").level == logging.WARNING

    def test_json_lines_on_stderr(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("quickadd.test").warning("note written", path="/v/n.md")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "note written"
        assert parsed["path"] == "/v/n.md"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "quickadd.test"
        assert "timestamp" in parsed

    def test_stdlib_loggers_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("quickadd.infrastructure.registry").debug("Skipping stale entry")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Skipping stale entry"
        assert parsed["level"] == "debug"

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("quickadd.services").debug("noise")
        assert capfd.readouterr().err == ""

    def test_reconfigure_replaces_own_handler(self) -> None:
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        handlers = logging.getLogger().handlers
        assert foreign in handlers
        assert len([h for h in handlers if getattr(h, "_quickadd_handler", False)]) == 1
