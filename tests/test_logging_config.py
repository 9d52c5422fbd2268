"""Tests for sdfshade.logging_config."""

import logging

import pytest

from sdfshade import sample_grid
from sdfshade.logging_config import resolve_level, setup_logging


@pytest.fixture
def sdfshade_logger():
    logger = logging.getLogger("sdfshade")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_single_console_handler(self, sdfshade_logger):
        setup_logging()
        setup_logging()
        assert len(sdfshade_logger.handlers) == 1
        assert sdfshade_logger.level == logging.INFO

    def test_file_handler(self, sdfshade_logger, tmp_path):
        path = tmp_path / "sdfshade.log"
        setup_logging(logging.DEBUG, str(path))
        assert len(sdfshade_logger.handlers) == 2
        sample_grid()
        for handler in sdfshade_logger.handlers:
            handler.flush()
        assert "Sampled 200x225 grid" in path.read_text(encoding="utf-8")

    def test_level_by_name(self, sdfshade_logger):
        setup_logging("debug")
        assert sdfshade_logger.level == logging.DEBUG

    def test_unknown_level_name(self, sdfshade_logger):
        with pytest.raises(ValueError):
            setup_logging("loud")


class TestResolveLevel:
    def test_int_passthrough(self):
        assert resolve_level(logging.WARNING) == logging.WARNING

    def test_name(self):
        assert resolve_level("Error") == logging.ERROR
