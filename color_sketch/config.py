"""
Global configuration for Color Sketch

Holds the fixed drawing/export policy and the small JSON settings file
that remembers where drawings are exported.
"""

import os
import sys
import json
from pathlib import Path
from typing import Final, Union


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Color Sketch"
    APP_VERSION: Final[str] = "1.0.0"
    APP_AUTHOR: Final[str] = "Color Sketch"
    WINDOW_TITLE: Final[str] = "Draw Something"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent

    # Export policy (fixed portrait HD, independent of the on-screen canvas)
    EXPORT_WIDTH: Final[int] = 1080
    EXPORT_HEIGHT: Final[int] = 1920
    EXPORT_FORMAT: Final[str] = "PNG"
    EXPORT_QUALITY: Final[int] = 100
    EXPORT_FILENAME_PREFIX: Final[str] = "drawing_"
    DEFAULT_EXPORT_FOLDER_NAME: Final[str] = "ColorSketch"

    # Brush settings
    DEFAULT_STROKE_WIDTH: Final[float] = 4.0
    MIN_STROKE_WIDTH: Final[float] = 1.0
    MAX_STROKE_WIDTH: Final[float] = 20.0
    STROKE_WIDTH_STEPS: Final[int] = 100  # Intermediate slider stops

    # Color slider settings
    COLOR_SLIDER_RESOLUTION: Final[int] = 1000  # Slider ticks for 0.0-1.0

    # UI settings
    DEFAULT_WINDOW_WIDTH: Final[int] = 480
    DEFAULT_WINDOW_HEIGHT: Final[int] = 860
    SWATCH_HEIGHT: Final[int] = 80
    CANVAS_BACKGROUND: Final[str] = "#ffffff"

    # Settings file
    SETTINGS_FILE_NAME: Final[str] = "settings.json"

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows), Application Support (macOS)
        or .local/share (Linux).
        """
        if sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / 'ColorSketch'
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / 'ColorSketch'
        else:
            user_dir = Path.home() / '.local' / 'share' / 'ColorSketch'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the folder that holds the log file."""
        return cls.get_user_data_dir() / 'logs'

    @classmethod
    def get_settings_file(cls) -> Path:
        """Get path to the JSON settings file."""
        return cls.get_user_data_dir() / cls.SETTINGS_FILE_NAME

    @classmethod
    def load_settings(cls) -> dict:
        """
        Load settings from disk

        Returns:
            dict with saved settings, or empty dict if missing/unreadable
        """
        settings_file = cls.get_settings_file()
        if settings_file.exists():
            try:
                with open(settings_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
            except (OSError, json.JSONDecodeError):
                pass  # Fall back to defaults
        return {}

    @classmethod
    def save_settings(cls, settings: dict) -> bool:
        """
        Save settings to disk

        Args:
            settings: dict of settings to persist

        Returns:
            bool: True if saved successfully, False otherwise
        """
        try:
            settings_file = cls.get_settings_file()
            settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(settings_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            return True
        except OSError:
            return False

    @classmethod
    def get_default_export_folder(cls) -> Path:
        """Default shared storage root: ~/Pictures/ColorSketch"""
        return Path.home() / 'Pictures' / cls.DEFAULT_EXPORT_FOLDER_NAME

    @classmethod
    def get_export_folder(cls) -> Path:
        """
        Get the shared storage folder drawings are exported to.

        The folder is not created here; creating it is what the storage
        permission request does.
        """
        path_str = cls.load_settings().get('export_folder', '')
        if path_str:
            return Path(path_str)
        return cls.get_default_export_folder()

    @classmethod
    def save_export_folder(cls, path: Union[str, Path]) -> bool:
        """
        Remember a custom export folder

        Args:
            path: Folder drawings should be exported to

        Returns:
            bool: True if saved successfully, False otherwise
        """
        settings = cls.load_settings()
        settings['export_folder'] = str(path)
        return cls.save_settings(settings)


__all__ = ['Config']
