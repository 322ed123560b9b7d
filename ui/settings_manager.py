"""
Settings Manager - Runtime configuration management

PURPOSE: Manage user spinner preferences without mutating config.py.
CONTEXT: In-memory settings that can be persisted to the user settings file.
"""

from pathlib import Path
from typing import Optional, Dict, Any
import json

from config import (
    DEFAULT_MAX_ANGLE,
    DEFAULT_MIN_ANGLE,
    DEFAULT_ROTATION_SPEED_MULTIPLIER,
    DEFAULT_SPINNER_COLOR,
    DEFAULT_SPINNER_SIZE,
    DEFAULT_SWEEP_TIME_MILLIS,
    SETTINGS_FILE,
)
from utils.logger import get_logger

logger = get_logger()

# Settings keys forwarded 1:1 to LoadingSpinner / SpinnerMotionModel
SPINNER_KEYS = (
    "size",
    "color",
    "stroke_width",
    "sweep_time_millis",
    "rotation_speed_multiplier",
    "min_angle",
    "max_angle",
)


class SettingsManager:
    """
    Manages runtime user settings

    WHY: Separates mutable user preferences from immutable system defaults in config.py
    """

    def __init__(self, settings_file: Optional[Path] = None):
        self.settings_file = settings_file or SETTINGS_FILE
        self.settings: Dict[str, Any] = {}
        self._load_defaults()
        self._load_from_file()

        logger.info("SettingsManager initialized")

    def _load_defaults(self):
        """Load default settings from config.py"""
        self.settings = {
            "size": DEFAULT_SPINNER_SIZE,
            "color": DEFAULT_SPINNER_COLOR,
            "stroke_width": None,  # size / 6
            "sweep_time_millis": DEFAULT_SWEEP_TIME_MILLIS,
            "rotation_speed_multiplier": DEFAULT_ROTATION_SPEED_MULTIPLIER,
            "min_angle": DEFAULT_MIN_ANGLE,
            "max_angle": DEFAULT_MAX_ANGLE,
        }

    def _load_from_file(self):
        """Load settings from user config file if it exists"""
        if not self.settings_file.exists():
            logger.debug("No user settings file found, using defaults")
            return

        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                user_settings = json.load(f)

            if not isinstance(user_settings, dict):
                raise ValueError("settings file must contain a JSON object")

            self.settings.update(user_settings)
            logger.info(f"Loaded user settings from {self.settings_file}")

        except Exception as e:
            logger.error(f"Error loading user settings: {e}", exc_info=True)

    def save(self) -> bool:
        """
        Save settings to file

        WHY: Persists user preferences across application restarts
        """
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=2)

            logger.info(f"Saved user settings to {self.settings_file}")
            return True

        except Exception as e:
            logger.error(f"Error saving user settings: {e}", exc_info=True)
            return False

    def reset(self):
        """Reset to config.py defaults (not persisted until save())"""
        self._load_defaults()

    def get(self, key: str, default: Any = None) -> Any:
        """Get setting value"""
        return self.settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set setting value"""
        self.settings[key] = value

    def get_size(self) -> float:
        return self.settings.get("size", DEFAULT_SPINNER_SIZE)

    def set_size(self, size: float):
        self.settings["size"] = size

    def get_color(self) -> str:
        return self.settings.get("color", DEFAULT_SPINNER_COLOR)

    def set_color(self, color: str):
        self.settings["color"] = color

    def get_sweep_time(self) -> int:
        """Get sweep duration in milliseconds"""
        return self.settings.get("sweep_time_millis", DEFAULT_SWEEP_TIME_MILLIS)

    def set_sweep_time(self, millis: int):
        self.settings["sweep_time_millis"] = millis

    def get_angles(self) -> tuple:
        """Get (min_angle, max_angle) as stored, before any correction"""
        return (
            self.settings.get("min_angle", DEFAULT_MIN_ANGLE),
            self.settings.get("max_angle", DEFAULT_MAX_ANGLE),
        )

    def set_angles(self, min_angle: float, max_angle: float):
        self.settings["min_angle"] = min_angle
        self.settings["max_angle"] = max_angle

    def spinner_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for LoadingSpinner built from current settings"""
        return {key: self.settings[key] for key in SPINNER_KEYS if key in self.settings}


# Global instance
_settings_manager: Optional[SettingsManager] = None


def get_settings_manager() -> SettingsManager:
    """Get global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager
