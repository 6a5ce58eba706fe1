"""
Settings for IGC Decoder.
These are configurable decoding parameters that can be changed by the user.
"""

import os
import json
import logging
from typing import Dict, Any, Optional
from .constants import (
    DEFAULT_ROLLOVER_TOLERANCE_SECONDS,
    DEFAULT_TEXT_UNDERSCORE_REPLACEMENT,
    DEFAULT_REGISTRATION_UNDERSCORE_REPLACEMENT,
    DEFAULT_ENCODING,
    DEFAULT_ENCODING_ERRORS,
)

logger = logging.getLogger("igc_decoder.settings")

CONFIG_ENV_VAR = "IGC_DECODER_CONFIG"


class Settings:
    """
    Decoder settings that can be loaded from and saved to a configuration file.
    Uses a singleton pattern to ensure only one settings instance exists.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Settings, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._settings = self._defaults()

        self.config_file = self._get_config_file()
        self._load_settings()

        self._initialized = True

    @staticmethod
    def _defaults() -> Dict[str, Any]:
        """Default settings"""
        return {
            # Timestamp resolution
            "rollover_tolerance_seconds": DEFAULT_ROLLOVER_TOLERANCE_SECONDS,

            # Header text handling
            "text_underscore_replacement": DEFAULT_TEXT_UNDERSCORE_REPLACEMENT,
            "registration_underscore_replacement": DEFAULT_REGISTRATION_UNDERSCORE_REPLACEMENT,

            # File reading
            "input_encoding": DEFAULT_ENCODING,
            "input_errors": DEFAULT_ENCODING_ERRORS,

            "log_level": "INFO",
        }

    @staticmethod
    def _get_config_file() -> str:
        """Get the path of the settings file"""
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return override

        if os.name == 'nt':  # Windows
            config_dir = os.path.join(os.environ.get('APPDATA', ''), 'IGCDecoder')
        else:  # Linux/Mac
            config_dir = os.path.join(os.path.expanduser("~"), '.config', 'igc-decoder')
        return os.path.join(config_dir, "settings.json")

    def _load_settings(self) -> None:
        """Load settings from the configuration file if it exists"""
        if not os.path.exists(self.config_file):
            logger.debug("No settings file found, using defaults")
            return

        try:
            self.load_from(self.config_file)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading settings: {e}")

    def load_from(self, config_file: str) -> None:
        """
        Load settings from a JSON file, overriding current values.

        Args:
            config_file: Path of the JSON settings file

        Raises:
            OSError: If the file can't be read
            ValueError: If the file isn't a JSON object
        """
        with open(config_file, 'r') as f:
            loaded_settings = json.load(f)
        if not isinstance(loaded_settings, dict):
            raise ValueError(f"Settings file must contain a JSON object: {config_file}")

        self._settings.update(loaded_settings)
        self.config_file = config_file
        logger.info(f"Settings loaded from {config_file}")

    def save_settings(self, config_file: Optional[str] = None) -> bool:
        """Save current settings to the configuration file"""
        target = config_file or self.config_file
        try:
            directory = os.path.dirname(target)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(target, 'w') as f:
                json.dump(self._settings, f, indent=4)
            logger.info(f"Settings saved to {target}")
            return True
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value by key"""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value by key"""
        self._settings[key] = value

    def get_all(self) -> Dict[str, Any]:
        """Get all settings as a dictionary"""
        return self._settings.copy()

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values"""
        self._settings = self._defaults()
        logger.info("Settings reset to defaults")


# Create a global settings instance
settings = Settings()
