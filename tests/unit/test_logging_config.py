"""Unit tests for logging_config.py"""

import logging

from docstore.logging_config import setup_logging


def test_setup_logging_sets_level():
    logger = setup_logging("debug")
    assert logger.name == "docstore"
    assert logger.level == logging.DEBUG


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging("INFO")
    logger = setup_logging("INFO")
    assert len(logger.handlers) == 1
    assert logger.propagate is False
