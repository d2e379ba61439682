"""Process-wide ConfigStore.

Startup code should prefer building a ConfigStore and passing it down
explicitly. For code that needs ambient access, get_app_config() loads
``<program-directory>/app-config.json`` once and caches the result:

    from appconfig import get_app_config

    dsn = get_app_config().get_connection_string("Default")

A failed load never propagates. The failure is reported to the diagnostic
sink and an empty store is cached instead, so every lookup falls back to
its lenient default.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from .adapters.diagnostics import LoggingDiagnosticSink
from .core.ports import DiagnosticSink
from .platform_utils import default_config_path
from .store import ConfigStore

logger = logging.getLogger(__name__)

# Cached instance (singleton pattern), guarded for first access
_instance: ConfigStore | None = None
_lock = threading.Lock()
_sink: DiagnosticSink = LoggingDiagnosticSink(logger)


def load_app_config(path: str | Path | None = None, sink: DiagnosticSink | None = None) -> ConfigStore:
    """Load a store, falling back to an empty one on any failure.

    Args:
        path: Config file; defaults to app-config.json beside the entry program
        sink: Where to report a failed load; defaults to the module sink

    Returns:
        The loaded store, or an empty store if loading failed
    """
    if path is None:
        path = default_config_path()
    try:
        return ConfigStore.from_file(path)
    except Exception as e:
        (sink or _sink).report(f"Failed to load application config from {path}", e)
        return ConfigStore()


def get_app_config() -> ConfigStore:
    """Return the process-wide store, loading it on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = load_app_config()
    return _instance


def set_app_config(store: ConfigStore) -> None:
    """Install an explicitly built store as the process-wide instance."""
    global _instance
    with _lock:
        _instance = store


def reset_app_config() -> None:
    """Forget the cached store so the next access loads again."""
    global _instance
    with _lock:
        _instance = None


def set_diagnostic_sink(sink: DiagnosticSink) -> None:
    global _sink
    _sink = sink
