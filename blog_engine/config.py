"""
Configuration management for the blog engine.
A single ConfigStore instance is shared by every component that needs settings.
"""
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError
from .interfaces import ConfigurationProvider


DEFAULT_SETTINGS: Dict[str, Any] = {
    "blog_name": "My Awesome Blog",
    "posts_per_page": 10,
    "allow_comments": True,
    "premium_enabled": True,
    "default_sort": "recency",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class EnvironmentConfigProvider:
    """Configuration provider that reads from environment variables"""

    def __init__(self, prefix: str = "BLOG_", dotenv_path: Optional[str] = None):
        self.prefix = prefix
        load_dotenv(dotenv_path)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value from environment"""
        env_key = f"{self.prefix}{key}".upper()
        return os.getenv(env_key, default)

    def validate(self) -> bool:
        """Basic validation - always returns True for env provider"""
        return True


class DictConfigProvider:
    """Configuration provider that reads from a dictionary"""

    def __init__(self, config_dict: Dict[str, Any]):
        self.config = config_dict

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value from dictionary"""
        return self.config.get(key, default)

    def validate(self) -> bool:
        """Validate that configuration dictionary is not empty"""
        return bool(self.config)


def _coerce(key: str, raw: Any, template: Any) -> Any:
    """Convert a provider value to the type of the default it replaces"""
    if not isinstance(raw, str) or isinstance(template, str) or template is None:
        return raw

    text = raw.strip().lower()
    if isinstance(template, bool):
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"Setting '{key}' expects a boolean, got {raw!r}")

    if isinstance(template, int):
        try:
            return int(text)
        except ValueError:
            raise ConfigurationError(f"Setting '{key}' expects an integer, got {raw!r}") from None

    if isinstance(template, float):
        try:
            return float(text)
        except ValueError:
            raise ConfigurationError(f"Setting '{key}' expects a number, got {raw!r}") from None

    return raw


class ConfigStore:
    """Process-wide key/value settings.

    Every holder of a store reference sees ``set`` and ``reset`` immediately;
    nothing is cached on the reading side. Unknown keys read as ``None`` (or
    the supplied default) instead of raising.
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        self._defaults = dict(DEFAULT_SETTINGS)
        self._settings = dict(self._defaults)
        if settings:
            self._settings.update(settings)

    @classmethod
    def from_provider(cls, provider: ConfigurationProvider) -> "ConfigStore":
        """Build a store from defaults overlaid with whatever the provider supplies"""
        if not provider.validate():
            raise ConfigurationError(f"{type(provider).__name__} failed validation")

        store = cls()
        for key, default in DEFAULT_SETTINGS.items():
            raw = provider.get(key)
            if raw is not None:
                store.set(key, _coerce(key, raw, default))
        return store

    @classmethod
    def from_env(cls, prefix: str = "BLOG_", dotenv_path: Optional[str] = None) -> "ConfigStore":
        """Build a store from BLOG_* environment variables (and a .env file)"""
        return cls.from_provider(EnvironmentConfigProvider(prefix, dotenv_path))

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value

    def contains(self, key: str) -> bool:
        """Tell a stored None apart from an absent key"""
        return key in self._settings

    def reset(self) -> None:
        """Restore default settings in place"""
        self._settings.clear()
        self._settings.update(self._defaults)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._settings)

    def __repr__(self) -> str:
        return f"ConfigStore({self._settings!r})"
