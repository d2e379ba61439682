"""Error types raised by appconfig."""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for all appconfig errors."""


class LoadError(ConfigError):
    """The configuration file is missing, unreadable or not a JSON object."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class MissingSettingError(ConfigError, KeyError):
    """A required key is not present in the configuration."""

    def __init__(self, name: str, section: str):
        super().__init__(f"{section} not defined: {name}")
        self.name = name
        self.section = section

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class TypeConversionError(ConfigError, TypeError, ValueError):
    """A present value cannot be converted into the requested shape."""

    def __init__(self, message: str, path: str = "", shape=None):
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path
        self.shape = shape
