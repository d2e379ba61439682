"""Locating the running program and its default config file."""

import platform
import sys
from pathlib import Path

DEFAULT_CONFIG_FILENAME = "app-config.json"


def get_entry_directory() -> Path:
    """Directory of the program that started the interpreter.

    Uses the __main__ module's file when there is one (scripts, ``python -m``,
    console entry points), then ``sys.argv[0]``, and finally the current
    working directory for interactive sessions.
    """
    main_file = getattr(sys.modules.get("__main__"), "__file__", None)
    if main_file:
        return Path(main_file).resolve().parent
    if sys.argv and sys.argv[0] and sys.argv[0] != "-c":
        argv0 = Path(sys.argv[0])
        if argv0.exists():
            return argv0.resolve().parent
    return Path.cwd()


def default_config_path(filename: str = DEFAULT_CONFIG_FILENAME) -> Path:
    return get_entry_directory() / filename


def get_platform_info() -> dict:
    """Get platform details relevant to config discovery."""
    return {
        "system": platform.system(),
        "release": platform.release(),
        "python_version": platform.python_version(),
        "entry_directory": str(get_entry_directory()),
        "default_config_path": str(default_config_path()),
    }


def print_platform_info():
    """Print platform information for debugging."""
    info = get_platform_info()
    print(f"Platform: {info['system']} {info['release']}")
    print(f"Python: {info['python_version']}")
    print(f"Config: {info['default_config_path']}")
