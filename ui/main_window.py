"""
Main window for the Loading Spinner demo.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QShowEvent
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from config import APP_NAME, WINDOW_HEIGHT, WINDOW_WIDTH
from ui.settings_manager import SettingsManager, get_settings_manager
from ui.theme import ColorPalette
from ui.widgets.loading_spinner import LoadingSpinner
from utils.logger import get_logger


class MainWindow(QMainWindow):
    """
    PURPOSE: Top-level window showing a single centered spinner.
    CONTEXT: Spinner parameters come from the user settings file.
    """

    def __init__(self, settings: Optional[SettingsManager] = None) -> None:
        super().__init__()
        self._logger = get_logger()
        self._settings = settings or get_settings_manager()

        self._setup_ui()

        self._logger.info("Main window initialised")

    def _setup_ui(self) -> None:
        self.setWindowTitle(APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setStyleSheet(f"background-color: {ColorPalette.BACKGROUND_PRIMARY};")

        self._spinner = LoadingSpinner(self, **self._settings.spinner_kwargs())

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.addWidget(self._spinner, 0, Qt.AlignCenter)
        self.setCentralWidget(central)

    @property
    def spinner(self) -> LoadingSpinner:
        return self._spinner

    def showEvent(self, event: QShowEvent) -> None:  # noqa: N802 (Qt override)
        super().showEvent(event)
        self._spinner.start()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 (Qt override)
        """Stop the animation timer before the window goes away"""
        self._logger.info("Application shutdown requested")
        self._spinner.stop()
        event.accept()
