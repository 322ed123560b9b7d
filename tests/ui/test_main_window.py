"""
Tests for MainWindow

PURPOSE: Verify the window hosts a spinner configured from user settings.
CONTEXT: Settings come from a temporary file so the real one is never touched.
"""

import pytest

from ui.main_window import MainWindow
from ui.widgets.loading_spinner import LoadingSpinner


@pytest.mark.unit
def test_main_window_creation(qtbot, spinner_settings):
    """Test that main window can be created"""
    window = MainWindow(spinner_settings)
    qtbot.addWidget(window)

    assert window.windowTitle() == "Loading Spinner"
    assert isinstance(window.spinner, LoadingSpinner)
    assert not window.spinner.is_running()


@pytest.mark.unit
def test_spinner_uses_settings(qtbot, spinner_settings):
    spinner_settings.set_size(64)
    spinner_settings.set_angles(400, 50)

    window = MainWindow(spinner_settings)
    qtbot.addWidget(window)

    assert window.spinner.width() == 64
    assert window.spinner.model.config.min_angle == 0.0
    assert window.spinner.model.config.max_angle == 50.0


@pytest.mark.unit
def test_show_starts_and_close_stops_spinner(qtbot, spinner_settings):
    window = MainWindow(spinner_settings)
    qtbot.addWidget(window)

    window.show()
    assert window.spinner.is_running()

    window.close()
    assert not window.spinner.is_running()


@pytest.mark.unit
def test_default_settings_manager(qtbot, reset_singletons, monkeypatch, tmp_path):
    import ui.settings_manager

    monkeypatch.setattr(ui.settings_manager, "SETTINGS_FILE", tmp_path / "user_settings.json")

    window = MainWindow()
    qtbot.addWidget(window)

    assert window.spinner.model.config.sweep_time_millis == 1300
