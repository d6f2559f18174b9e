"""
Pytest configuration and fixtures.
"""

import datetime
import logging

import pytest
from PySide6.QtCore import QCoreApplication

from timekeep.i18n import set_language


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """A Qt application object so QObjects and timers behave as in the app"""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture(autouse=True)
def english():
    """Every test starts with English labels"""
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def restore_root_logging():
    """Undo level changes made by configure_logging"""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


@pytest.fixture
def reference_date() -> datetime.datetime:
    """Tuesday, 3 January 2023, local midnight"""
    return datetime.datetime(2023, 1, 3)


@pytest.fixture
def fixed_now() -> datetime.datetime:
    """A fixed 'now' so relative labels do not depend on the wall clock"""
    return datetime.datetime(2023, 1, 3, 12, 0, 0)
