"""
Config Manager - dot notation access to config/ modules
"""

import importlib
import threading
from typing import Any, Optional, Dict

_MISSING = object()


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        paths = Config.get('view.PATHS', ['views'])
        Config.set('view.WRITER_BUFFER_SIZE', 4096)

        if Config.has('app.APP_DEBUG'):
            ...

    Config files live in the config/ package of the application:
        config/
        ├── app.py
        ├── logging.py
        └── view.py
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'view.paths')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        key_lower = key.lower()

        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        file_name, *path = key_lower.split('.')
        value = cls.all(file_name)
        if value is None:
            return default

        for part in path:
            value = cls._find(value, part)
            if value is _MISSING:
                return default

        return value

    @staticmethod
    def _find(container: Any, part: str) -> Any:
        """Case-insensitive lookup of one path segment on a module, object or dict"""
        if isinstance(container, dict):
            for dict_key in container.keys():
                if str(dict_key).lower() == part:
                    return container[dict_key]
            return _MISSING

        if hasattr(container, '__dict__'):
            for attr_name in dir(container):
                if attr_name.lower() == part:
                    return getattr(container, attr_name)

        return _MISSING

    @classmethod
    def _load_config_file(cls, file_name: str):
        """Import config/<file_name>.py, remembering a miss as None"""
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                cls._loaded[file_name] = importlib.import_module(f'config.{file_name}')
            except ImportError:
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('view.paths', ['resources/views'])
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def all(cls, file_name: str) -> Optional[Any]:
        """Get the whole config module for a file, or None"""
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        return cls._loaded.get(file_name)

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
