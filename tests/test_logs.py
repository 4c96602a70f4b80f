"""Test logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from howinstall.utils.logs import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root logger back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    urllib3_level = logging.getLogger("urllib3").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("urllib3").setLevel(urllib3_level)


def test_setup_logging_installs_rich_handler():
    setup_logging("INFO")
    
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert any(isinstance(h, RichHandler) for h in root.handlers)


def test_setup_logging_quiets_urllib3():
    setup_logging("INFO")
    
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_setup_logging_debug_leaves_urllib3():
    logging.getLogger("urllib3").setLevel(logging.NOTSET)
    
    setup_logging("debug")
    
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.NOTSET


def test_setup_logging_unknown_level():
    setup_logging("chatty")
    
    assert logging.getLogger().level == logging.WARNING
