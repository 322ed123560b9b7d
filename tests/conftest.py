"""
Shared pytest fixtures

PURPOSE: Headless Qt platform and singleton resets for all tests.
CONTEXT: QT_QPA_PLATFORM must be set before any PySide6 import.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def reset_singletons():
    """
    Reset singleton instances before and after each test

    WHY: Prevents state leakage between tests
    """
    import ui.settings_manager

    ui.settings_manager._settings_manager = None

    yield

    ui.settings_manager._settings_manager = None


@pytest.fixture
def spinner_settings(tmp_path):
    """SettingsManager bound to a throwaway settings file"""
    from ui.settings_manager import SettingsManager

    return SettingsManager(tmp_path / "user_settings.json")
