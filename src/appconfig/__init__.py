"""appconfig - Typed access to JSON application configuration files"""

__version__ = "1.0.0"
__description__ = "Typed access to JSON application configuration files"

from .application import (
    get_app_config,
    load_app_config,
    reset_app_config,
    set_app_config,
    set_diagnostic_sink,
)
from .core.conversion import convert, default_for
from .core.settings import AppSetting, SettingKind
from .errors import ConfigError, LoadError, MissingSettingError, TypeConversionError
from .store import ConfigStore

__all__ = [
    "AppSetting",
    "ConfigError",
    "ConfigStore",
    "LoadError",
    "MissingSettingError",
    "SettingKind",
    "TypeConversionError",
    "__version__",
    "convert",
    "default_for",
    "get_app_config",
    "load_app_config",
    "reset_app_config",
    "set_app_config",
    "set_diagnostic_sink",
]
