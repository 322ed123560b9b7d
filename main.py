#!/usr/bin/env python3

"""
Loading Spinner - Main Entry Point

Desktop window showing the animated arc spinner
"""
import sys
from pathlib import Path
from typing import Optional

# Füge Projekt-Root zum Python Path hinzu
sys.path.insert(0, str(Path(__file__).parent))

from utils.logger import get_logger
from config import APP_NAME, APP_VERSION, LOG_FILE

logger = get_logger()


def main():
    """Main Entry Point"""
    app: Optional["QApplication"] = None

    try:
        from PySide6.QtWidgets import QApplication, QMessageBox
        from ui.main_window import MainWindow

        logger.info("=" * 60)
        logger.info(f"Starting {APP_NAME} v{APP_VERSION}")
        logger.info("=" * 60)

        app = QApplication(sys.argv)
        app.setApplicationName(APP_NAME)
        app.setApplicationDisplayName(APP_NAME)
        app.setApplicationVersion(APP_VERSION)

        window = MainWindow()
        window.show()

        exit_code = app.exec()
        logger.info(f"{APP_NAME} exited with code {exit_code}")
        sys.exit(exit_code)

    except KeyboardInterrupt:
        logger.info("\nShutdown requested by user")
        sys.exit(0)

    except Exception as gui_error:  # pragma: no cover - GUI bootstrap failure is fatal
        logger.critical(
            f"Failed to start GUI: {gui_error}",
            exc_info=True,
        )

        if app:
            QMessageBox.critical(
                None,
                "Application Error",
                f"Unable to start the GUI.\n\nDetails: {gui_error}\nSee log file: {LOG_FILE}",
            )
        sys.exit(1)


if __name__ == "__main__":
    main()
