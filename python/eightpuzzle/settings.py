"""User preferences stored as JSON.

Settings live in ``config.json`` in the working directory unless another
path is given.  Missing keys fall back to :data:`DEFAULT_SETTINGS`, and so
does any value of the wrong type or out of range.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

from eightpuzzle.engine.gamesolver import Algorithm, Heuristic
from eightpuzzle.models.board import Configuration

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: dict[str, Any] = {
    "algorithm": "astar",
    "heuristic": "manhattan",
    "ids_max_depth": 40,
    "playback_interval_ms": 360,
    "scramble_moves": 30,
    "start": "123405678",
}


def _is_int(value: Any) -> bool:
    # bool is an int subclass; ``true`` in JSON is not a count.
    return isinstance(value, int) and not isinstance(value, bool)


def _is_start(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        Configuration.from_string(value)
    except ValueError:
        return False
    return True


_VALIDATORS: dict[str, Callable[[Any], bool]] = {
    "algorithm": lambda v: isinstance(v, str) and v in {a.value for a in Algorithm},
    "heuristic": lambda v: isinstance(v, str) and v in {h.value for h in Heuristic},
    "ids_max_depth": lambda v: _is_int(v) and v >= 0,
    "playback_interval_ms": lambda v: (
        (_is_int(v) or isinstance(v, float)) and v > 0
    ),
    "scramble_moves": lambda v: _is_int(v) and v > 0,
    "start": _is_start,
}


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Load settings from *path* (default :data:`SETTINGS_FILE`).

    Returns the defaults if the file is missing or unreadable.  A key whose
    value is out of range keeps its default and logs a warning.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file %s not found, using defaults", path)
        return DEFAULT_SETTINGS.copy()

    try:
        settings = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load settings from %s: %s, using defaults", path, e)
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning("Settings file %s does not hold an object, using defaults", path)
        return DEFAULT_SETTINGS.copy()

    result = DEFAULT_SETTINGS.copy()
    for key, value in settings.items():
        if key not in DEFAULT_SETTINGS:
            continue
        if not _VALIDATORS[key](value):
            logger.warning(
                "Invalid %s %r in %s, using default %r",
                key, value, path, DEFAULT_SETTINGS[key],
            )
            continue
        result[key] = value
    logger.debug("Settings loaded: %s", result)
    return result


def save_settings(settings: dict[str, Any], path: Path | None = None) -> None:
    """Write *settings* to *path* (default :data:`SETTINGS_FILE`)."""
    path = path or SETTINGS_FILE
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(settings, indent=2) + "\n", encoding="utf-8")
        logger.debug("Settings saved: %s", settings)
    except OSError as e:
        logger.error("Failed to save settings to %s: %s", path, e)
