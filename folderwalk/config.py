"""Persisted run defaults.

Reads default values for ``--ascii``, ``--content`` and ``--max-depth`` from
a JSON object in the user config directory. Missing, malformed, or wrongly
typed values fall back to the built-in defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "folderwalk"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class RunDefaults:
    """Starting values for CLI options before flags are applied."""

    ascii_only: bool = False
    show_content: bool = False
    max_depth: int | None = None


def load_config() -> dict[str, object]:
    """Load the JSON object at ``CONFIG_PATH``, or ``{}`` when unusable."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_depth(value: object) -> int | None:
    # bool is an int subclass; JSON true/false is not a depth.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def load_defaults() -> RunDefaults:
    """Read the config file once and derive every run default from it."""
    data = load_config()
    ascii_only = data.get("ascii")
    show_content = data.get("content")
    return RunDefaults(
        ascii_only=ascii_only if isinstance(ascii_only, bool) else False,
        show_content=show_content if isinstance(show_content, bool) else False,
        max_depth=_coerce_depth(data.get("max_depth")),
    )
