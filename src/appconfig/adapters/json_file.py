"""JSON source adapter: reads and parses configuration documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..core.conversion import json_type_name
from ..errors import LoadError

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_json_text(text: str, source: str | None = None) -> dict[str, Any]:
    """Parse JSON text that must hold a top-level object.

    Raises:
        LoadError: if the text is not valid JSON or not an object
    """
    where = source or "<string>"
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError, NaN/Infinity, or an integer past the digit limit
        raise LoadError(f"Invalid JSON in config {where}: {e}", source=source) from e
    if not isinstance(data, dict):
        raise LoadError(
            f"Config {where} must be a JSON object, got {json_type_name(data)}", source=source
        )
    return data


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a configuration file from disk.

    The file is decoded as UTF-8; a leading byte-order mark is ignored.

    Raises:
        LoadError: if the file is missing, unreadable or not a JSON object
    """
    p = Path(path)
    if not p.exists():
        raise LoadError(f"Config does not exist at {p}", source=str(p))
    try:
        text = p.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read config at {p}: {e}", source=str(p)) from e
    logger.debug(f"Read {len(text)} characters from {p}")
    return parse_json_text(text, source=str(p))
