"""Tests for logger configuration."""

import sys

import pytest
from loguru import logger

from plankflow.config.settings import Settings
from plankflow.core.logger import configure_from_settings, setup_logger


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_handler_writes_messages(tmp_path):
    log_file = tmp_path / "logs" / "plankflow.log"

    setup_logger(level="INFO", log_file=str(log_file))
    logger.debug("hidden detail")
    logger.info("Phase countdown -> exercise")
    logger.remove()

    content = log_file.read_text()
    assert "Phase countdown -> exercise" in content
    assert "hidden detail" not in content


def test_configure_from_settings_debug_override(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PLANKFLOW_LOG_FILE", str(tmp_path / "debug.log"))
    monkeypatch.setenv("PLANKFLOW_LOG_LEVEL", "WARNING")

    configure_from_settings(Settings(), debug=True)
    logger.debug("segment closed")
    logger.remove()

    assert "segment closed" in (tmp_path / "debug.log").read_text()
