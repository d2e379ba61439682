"""ConfigStore: typed, read-only access to a JSON configuration document.

The document layout is:

    {
      "ConnectionStrings": {"<name>": "<connection-string>", ...},
      "AppSettings": {"<name>": <scalar-or-object>, ...},
      "<SectionName>": <any-json-value>, ...
    }

Both reserved sections are optional. Any top-level key, reserved or not,
can be fetched with get_object().

Usage:
    store = ConfigStore.from_file("app-config.json")
    timeout = store.get_app_setting("Timeout", float)
    dsn = store.get_connection_string("Default", required=True)
    smtp = store.get_object("Smtp", SmtpSettings)
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .adapters.json_file import parse_json_text, read_json_file
from .core.conversion import convert, default_for, json_type_name
from .core.settings import AppSetting
from .errors import LoadError, MissingSettingError

logger = logging.getLogger(__name__)

APP_SETTINGS_KEY = "AppSettings"
CONNECTION_STRINGS_KEY = "ConnectionStrings"

_UNSET: Any = object()


def _parse_app_settings(section: Any) -> dict[str, AppSetting]:
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        logger.warning(f"Ignoring {APP_SETTINGS_KEY}: expected an object, got {json_type_name(section)}")
        return {}
    return {name: AppSetting.from_json(name, value) for name, value in section.items()}


def _parse_connection_strings(section: Any) -> dict[str, str | None]:
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        logger.warning(
            f"Ignoring {CONNECTION_STRINGS_KEY}: expected an object, got {json_type_name(section)}"
        )
        return {}

    connection_strings: dict[str, str | None] = {}
    for name, value in section.items():
        if value is None or isinstance(value, str):
            connection_strings[name] = value
        elif isinstance(value, bool):
            connection_strings[name] = "true" if value else "false"
        elif isinstance(value, (int, float)):
            connection_strings[name] = str(value)
        else:
            logger.warning(
                f"Skipping connection string {name!r}: expected a string, got {json_type_name(value)}"
            )
    return connection_strings


class ConfigStore:
    """Read-only view over a parsed configuration document.

    The AppSettings and ConnectionStrings maps are derived once at
    construction. Nothing mutates afterwards, so a store can be shared
    between threads without locking.
    """

    def __init__(self, document: Mapping[str, Any] | None = None, *, source: str | None = None):
        """Create a store from an already parsed document.

        Args:
            document: Top-level JSON object; None is treated as an empty object
            source: Where the document came from, for diagnostics only

        Raises:
            LoadError: if ``document`` is not a mapping
        """
        if document is None:
            document = {}
        if not isinstance(document, Mapping):
            raise LoadError(
                f"Config document must be a JSON object, got {json_type_name(document)}",
                source=source,
            )
        self._source = source
        self._config = MappingProxyType(copy.deepcopy(dict(document)))
        self._app_settings = MappingProxyType(_parse_app_settings(self._config.get(APP_SETTINGS_KEY)))
        self._connection_strings = MappingProxyType(
            _parse_connection_strings(self._config.get(CONNECTION_STRINGS_KEY))
        )
        logger.debug(
            f"Loaded config from {source or '<document>'}: {len(self._app_settings)} app settings, "
            f"{len(self._connection_strings)} connection strings, {len(self._config)} sections"
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "ConfigStore":
        """Load a store from a JSON file.

        Raises:
            LoadError: if the file is missing, unreadable or not a JSON object
        """
        return cls(read_json_file(path), source=str(path))

    @classmethod
    def from_json(cls, text: str, source: str | None = None) -> "ConfigStore":
        """Load a store from JSON text.

        Raises:
            LoadError: if the text is not a valid JSON object
        """
        return cls(parse_json_text(text, source=source), source=source)

    @classmethod
    def from_document(cls, document: Mapping[str, Any] | None) -> "ConfigStore":
        return cls(document)

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def app_settings(self) -> Mapping[str, AppSetting]:
        return self._app_settings

    @property
    def connection_strings(self) -> Mapping[str, str | None]:
        return self._connection_strings

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={self._source!r}, "
            f"app_settings={len(self._app_settings)}, "
            f"connection_strings={len(self._connection_strings)})"
        )

    # Accessors

    def get_app_setting(
        self, name: str, shape: Any = None, *, required: bool = False, default: Any = _UNSET
    ) -> Any:
        """Get a value from the AppSettings section.

        Scalars are coerced to ``shape``; nested objects are converted
        structurally (see appconfig.core.conversion).

        Args:
            name: Setting name
            shape: Expected result shape; None returns the raw value
            required: Raise MissingSettingError when the setting is absent
            default: Returned instead of the shape's default when absent

        Raises:
            MissingSettingError: if absent and ``required`` is set
            TypeConversionError: if the value cannot be converted to ``shape``
        """
        setting = self._app_settings.get(name)
        if setting is None:
            return self._missing(name, "Setting", shape, required, default)
        return convert(setting.value, shape, path=f"{APP_SETTINGS_KEY}.{name}")

    def get_connection_string(self, name: str, *, required: bool = False) -> str | None:
        """Get a value from the ConnectionStrings section.

        Raises:
            MissingSettingError: if absent and ``required`` is set
        """
        if name not in self._connection_strings:
            if required:
                raise MissingSettingError(name, "Connection string")
            return None
        return self._connection_strings[name]

    def get_object(
        self, name: str, shape: Any = None, *, required: bool = False, default: Any = _UNSET
    ) -> Any:
        """Get a top-level section converted into ``shape``.

        Raises:
            MissingSettingError: if absent and ``required`` is set
            TypeConversionError: if the section cannot be converted to ``shape``
        """
        if name not in self._config:
            return self._missing(name, "Config section", shape, required, default)
        return convert(self._config[name], shape, path=name)

    def _missing(self, name: str, section: str, shape: Any, required: bool, default: Any) -> Any:
        if required:
            raise MissingSettingError(name, section)
        if default is not _UNSET:
            return default
        return default_for(shape)

    # Introspection

    def app_setting(self, name: str) -> AppSetting | None:
        return self._app_settings.get(name)

    def has_app_setting(self, name: str) -> bool:
        return name in self._app_settings

    def has_connection_string(self, name: str) -> bool:
        return name in self._connection_strings

    def has_section(self, name: str) -> bool:
        return name in self._config

    def app_setting_names(self) -> list[str]:
        return list(self._app_settings)

    def connection_string_names(self) -> list[str]:
        return list(self._connection_strings)

    def section_names(self) -> list[str]:
        return list(self._config)
