"""Mini README: Tests for the shared logging helpers.

Re-configuring the root logger must only change its level; the fleet handler
is installed once.
"""

from __future__ import annotations

import logging

import pytest

from fleetbudget.logging_utils import configure_root_logger, get_logger, resolve_level


@pytest.fixture(autouse=True)
def _restore_root_level():
    root_logger = logging.getLogger()
    original = root_logger.level
    yield
    root_logger.setLevel(original)


def test_reconfiguring_changes_level_without_new_handlers() -> None:
    get_logger(__name__)
    root_logger = logging.getLogger()
    handler_count = len(root_logger.handlers)

    configure_root_logger("DEBUG")
    assert root_logger.level == logging.DEBUG
    configure_root_logger("INFO")
    assert root_logger.level == logging.INFO

    assert len(root_logger.handlers) == handler_count


def test_resolve_level_accepts_names_and_numbers() -> None:
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("chatty")
