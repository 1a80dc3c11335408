"""
Settings manager implementation for Segue.

Uses QSettings for persistent storage of demo and host preferences.
"""
from typing import Any, Callable, Dict, List
import threading
from PySide6.QtCore import QSettings, QObject, Signal

from core.constants.timing import (
    DEFAULT_SEGMENT_DURATION_S,
    MAX_REPAINT_INTERVAL_MS,
    MIN_REPAINT_INTERVAL_MS,
    REPAINT_INTERVAL_MS,
)
from core.constants.sizes import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH
from core.logging.logger import get_logger, is_verbose_logging

logger = get_logger('SettingsManager')

DEFAULT_SETTINGS: Dict[str, Any] = {
    # Host
    'display.repaint_interval_ms': REPAINT_INTERVAL_MS,
    'display.window_width': DEFAULT_WINDOW_WIDTH,
    'display.window_height': DEFAULT_WINDOW_HEIGHT,

    # Demo selection
    'app.demo': 'showcase',  # 'showcase' | 'menu' | 'variable'

    # Showcase demo configuration
    'showcase.out_duration': DEFAULT_SEGMENT_DURATION_S,
    'showcase.in_duration': DEFAULT_SEGMENT_DURATION_S,
    'showcase.out_effect': 'slide_fade_ease_right',
    'showcase.in_effect': 'slide_fade_ease_right',
    # When True the in segment mirrors the out segment's effect and duration.
    'showcase.in_copy_from_out': True,
}


class SettingsManager(QObject):
    """
    Centralized settings management.

    Uses QSettings for persistent storage with organization/application name.
    Thread-safe with change notifications.
    """

    # Signal emitted when settings change
    settings_changed = Signal(str, object)  # key, new_value

    def __init__(self, organization: str = "Segue", application: str = "SegueDemos"):
        """
        Initialize the settings manager.

        Args:
            organization: Organization name for QSettings
            application: Application name for QSettings
        """
        super().__init__()

        self._settings = QSettings(organization, application)
        self._organization = organization
        self._application = application
        self._lock = threading.RLock()
        self._change_handlers: Dict[str, List[Callable]] = {}

        self._set_defaults()

        logger.info("SettingsManager initialized (%s/%s)", organization, application)

    def _set_defaults(self) -> None:
        """Set default values if not already present."""
        with self._lock:
            for key, value in DEFAULT_SETTINGS.items():
                if not self._settings.contains(key):
                    self._settings.setValue(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.

        Args:
            key: Setting key in dot notation (e.g., 'showcase.out_duration')
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        with self._lock:
            return self._settings.value(key, default)

    @staticmethod
    def to_bool(value: Any, default: bool = False) -> bool:
        """Normalize a stored setting value to bool.

        Accepts common string forms ("true", "1", "yes", "on") as True and
        ("false", "0", "no", "off") as False. Some QSettings backends hand
        booleans back as strings.
        """
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            v = value.strip().lower()
            if v in ("true", "1", "yes", "on"):
                return True
            if v in ("false", "0", "no", "off"):
                return False
            return default
        if value is None:
            return default
        return bool(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Convenience wrapper around get() that normalizes to bool."""
        return self.to_bool(self.get(key, default), default)

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Convenience wrapper around get() that normalizes to float."""
        raw = self.get(key, default)
        try:
            return float(raw)
        except (TypeError, ValueError):
            logger.warning("Setting %s is not a number (%r), using %r", key, raw, default)
            return float(default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Convenience wrapper around get() that normalizes to int."""
        raw = self.get(key, default)
        try:
            return int(float(raw))
        except (TypeError, ValueError):
            logger.warning("Setting %s is not an integer (%r), using %r", key, raw, default)
            return int(default)

    def get_repaint_interval_ms(self) -> int:
        """Host repaint interval clamped to a sane range."""
        interval = self.get_int('display.repaint_interval_ms', REPAINT_INTERVAL_MS)
        return max(MIN_REPAINT_INTERVAL_MS, min(MAX_REPAINT_INTERVAL_MS, interval))

    def set(self, key: str, value: Any) -> None:
        """
        Set a setting value.

        Args:
            key: Setting key in dot notation
            value: Value to set
        """
        with self._lock:
            old_value = self._settings.value(key)
            self._settings.setValue(key, value)

            self.settings_changed.emit(key, value)

            for handler in self._change_handlers.get(key, []):
                try:
                    handler(value, old_value)
                except Exception as e:
                    logger.error(f"Error in change handler for {key}: {e}")

        if is_verbose_logging():
            logger.debug("Setting changed: %s: %r -> %r", key, old_value, value)
        else:
            logger.debug("Setting changed: %s", key)

    def save(self) -> None:
        """Force save settings to persistent storage."""
        with self._lock:
            self._settings.sync()
        logger.debug("Settings saved")

    def on_changed(self, key: str, handler: Callable[[Any, Any], None]) -> None:
        """
        Register a handler for when a specific setting changes.

        Args:
            key: Setting key to watch
            handler: Callback function(new_value, old_value)
        """
        with self._lock:
            self._change_handlers.setdefault(key, []).append(handler)

        logger.debug(f"Registered change handler for {key}")

    def reset_to_defaults(self) -> None:
        """Reset all settings to default values."""
        with self._lock:
            self._settings.clear()
            for key, value in DEFAULT_SETTINGS.items():
                self._settings.setValue(key, value)
            self._settings.sync()

        logger.info("Settings reset to defaults")
        self.settings_changed.emit('*', None)

    def get_all_keys(self) -> List[str]:
        with self._lock:
            return self._settings.allKeys()

    def contains(self, key: str) -> bool:
        with self._lock:
            return self._settings.contains(key)

    def remove(self, key: str) -> None:
        with self._lock:
            self._settings.remove(key)
        logger.debug(f"Removed setting: {key}")

    def clear(self) -> None:
        """Clear all settings (use with caution)."""
        with self._lock:
            self._settings.clear()
        logger.warning("All settings cleared")
