"""
Configuration service for Stipple.

This module handles loading, saving, and managing application settings.
Configuration is stored as JSON in ~/.config/stipple/config.json following
the XDG Base Directory Specification.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from src.services.logging_service import get_logger

# Default configuration directory following XDG Base Directory Specification
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "stipple"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"

# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "theme": "dark",
    # Tool identifier activated at startup; the first tool by priority
    # stays active when no registered tool matches
    "default_tool": "PencilTool",
    "log_level": "INFO",
    "log_to_file": True,
    "log_keep_days": 7,
    "window": {
        "width": 1200,
        "height": 800,
    },
}


class ConfigService:
    """
    Service for managing application configuration.

    Handles loading, saving, and accessing configuration values.
    Provides sensible defaults when config file is missing or corrupted.
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize the ConfigService.

        Args:
            config_path: Optional path to config file. Defaults to
                        ~/.config/stipple/config.json
        """
        self._logger = get_logger(__name__)
        self._config_path = config_path or DEFAULT_CONFIG_FILE
        self._config: Dict[str, Any] = {}

        self._load()

    def _load(self) -> None:
        """Load configuration from file, using defaults if needed."""
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        if not self._config_path.exists():
            self._logger.info(
                f"Config file not found at {self._config_path}. Using defaults."
            )
            self._save_to_file()
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)

            if isinstance(loaded_config, dict):
                self._deep_merge(self._config, loaded_config)
                self._logger.info(f"Configuration loaded from {self._config_path}")
                # Save back to ensure any new default keys are persisted
                self._save_to_file()
            else:
                raise ValueError("Config file does not contain a valid JSON object")

        except (json.JSONDecodeError, ValueError) as e:
            self._logger.warning(
                f"Config file corrupted or invalid: {e}. Recreating with defaults."
            )
            self._config = copy.deepcopy(DEFAULT_CONFIG)
            self._save_to_file()

        except (OSError, PermissionError) as e:
            self._logger.warning(
                f"Could not read config file: {e}. Using defaults."
            )

    def _deep_merge(self, base: Dict, override: Dict) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _save_to_file(self) -> None:
        """Save current configuration to file."""
        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self._config_path, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)

            self._logger.debug(f"Configuration saved to {self._config_path}")

        except (OSError, PermissionError) as e:
            self._logger.error(f"Could not save config file: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: The configuration key to retrieve.
            default: Default value if key doesn't exist.

        Returns:
            The configuration value, or default if not found.
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value (in memory only).

        Note:
            Call save() to persist changes to disk.
        """
        self._config[key] = value
        self._logger.debug(f"Config key '{key}' set to '{value}'")

    def save(self) -> None:
        """Persist current configuration to disk."""
        self._save_to_file()

    # ─── Appearance ───────────────────────────────────────────────────────

    @property
    def theme(self) -> str:
        """Get the current theme setting."""
        return self.get("theme", "dark")

    @property
    def window_size(self) -> Tuple[int, int]:
        """Get the initial (width, height) of the main window."""
        window = self.get("window")
        if not isinstance(window, dict):
            self._logger.warning(f"Ignoring invalid window setting: {window!r}")
            window = {}
        return (self._dimension(window, "width"), self._dimension(window, "height"))

    def _dimension(self, window: Dict[str, Any], key: str) -> int:
        default = DEFAULT_CONFIG["window"][key]
        value = window.get(key, default)
        # bool is an int subclass but never a valid size
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            self._logger.warning(f"Ignoring invalid window {key}: {value!r}")
            return default
        return value

    # ─── Tools ────────────────────────────────────────────────────────────

    @property
    def default_tool(self) -> str:
        """Get the identifier of the tool activated at startup."""
        value = self.get("default_tool", DEFAULT_CONFIG["default_tool"])
        if not isinstance(value, str):
            self._logger.warning(f"Ignoring invalid default_tool: {value!r}")
            return DEFAULT_CONFIG["default_tool"]
        return value

    # ─── Logging ──────────────────────────────────────────────────────────

    @property
    def log_level(self) -> str:
        return self.get("log_level", "INFO")

    @property
    def log_to_file(self) -> bool:
        return self.get("log_to_file", True)

    @property
    def log_keep_days(self) -> int:
        """Number of daily log files kept on disk."""
        value = self.get("log_keep_days", DEFAULT_CONFIG["log_keep_days"])
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            self._logger.warning(f"Ignoring invalid log_keep_days: {value!r}")
            return DEFAULT_CONFIG["log_keep_days"]
        return value
