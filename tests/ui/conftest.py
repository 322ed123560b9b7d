"""
Pytest fixtures for UI tests

PURPOSE: Provide shared fixtures for Qt-based GUI testing.
CONTEXT: Handles QApplication lifecycle.
"""

import sys

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """
    Create QApplication instance for entire test session

    WHY: QApplication can only be created once per process
    """
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    # Don't quit - other tests may need it
