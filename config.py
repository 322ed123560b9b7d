"""
Zentrale Konfiguration für Loading Spinner
"""

import os
import sys
from pathlib import Path


def get_user_dir():
    """
    Get the user data directory for writable files (logs, settings).

    In bundled app, we can't write to the app bundle, so use user's home directory.
    """
    if getattr(sys, "frozen", False):
        if sys.platform == "darwin":  # macOS
            user_dir = Path.home() / "Library" / "Application Support" / "LoadingSpinner"
        elif sys.platform == "win32":  # Windows
            user_dir = Path(os.environ.get("APPDATA", Path.home())) / "LoadingSpinner"
        else:  # Linux
            user_dir = Path.home() / ".loadingspinner"

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir
    else:
        # Running from source - use project directory
        return Path(__file__).parent


# Basis-Pfade
USER_DIR = get_user_dir()

# User data (writable)
LOGS_DIR = USER_DIR / "logs"
SETTINGS_FILE = USER_DIR / "user_settings.json"

LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Spinner-Defaults (logische Einheiten, Grad, Millisekunden)
DEFAULT_SPINNER_SIZE = 36.0
DEFAULT_SPINNER_COLOR = "#667eea"  # ColorPalette.ACCENT_PRIMARY
DEFAULT_SWEEP_TIME_MILLIS = 1300
DEFAULT_ROTATION_SPEED_MULTIPLIER = 2.0
DEFAULT_MIN_ANGLE = 3.0
DEFAULT_MAX_ANGLE = 270.0

# Stroke width defaults to size / STROKE_WIDTH_DIVISOR
STROKE_WIDTH_DIVISOR = 6

# Animation
FRAME_INTERVAL_MS = 16  # ~60 fps

# Logging
LOG_FILE = LOGS_DIR / "app.log"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR

# UI-Konfiguration
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 360

# App-Metadaten
APP_NAME = "Loading Spinner"
APP_VERSION = "1.0.0"
