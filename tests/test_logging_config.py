"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from boilergen.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate


def test_get_logger_namespaces_names():
    assert get_logger("tools").name == "boilergen.tools"
    assert get_logger("boilergen.core.templates").name == "boilergen.core.templates"
    assert get_logger("boilergen").name == "boilergen"


def test_setup_logging_rich(restore_root_logger):
    setup_logging("DEBUG")
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], RichHandler)


def test_setup_logging_plain_replaces_handlers(restore_root_logger):
    setup_logging(logging.INFO)
    setup_logging(logging.INFO, rich_output=False)
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], RichHandler)
