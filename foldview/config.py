"""Persistent JSON config helpers.

Stores the UI theme, the Pygments style, and the collapsed uids of each
document that was browsed. All access is defensive: malformed or missing
config falls back safely.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "foldview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write errors are logged and ignored."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError) as exc:
        logger.debug("could not save config %s: %s", CONFIG_PATH, exc)


def _load_name(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_name(key: str, name: str) -> None:
    stripped = str(name).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_name("theme")


def save_theme_name(theme_name: str) -> None:
    _save_name("theme", theme_name)


def load_style_name() -> str | None:
    """Load persisted Pygments style name, returning ``None`` when unset/invalid."""
    return _load_name("style")


def save_style_name(style_name: str) -> None:
    _save_name("style", style_name)


def _document_key(path: Path) -> str:
    return str(path.expanduser().resolve())


def load_collapsed_uids(path: Path) -> frozenset[str] | None:
    """Return saved collapsed uids for document ``path``.

    ``None`` means nothing usable was saved; non-string entries are dropped.
    """
    value = load_config().get("collapsed")
    if not isinstance(value, dict):
        return None
    uids = value.get(_document_key(path))
    if not isinstance(uids, list):
        return None
    return frozenset(uid for uid in uids if isinstance(uid, str))


def save_collapsed_uids(path: Path, uids: Iterable[object]) -> None:
    """Persist the collapsed uids of document ``path`` in sorted order."""
    config = load_config()
    by_document = config.get("collapsed")
    if not isinstance(by_document, dict):
        by_document = {}
    by_document[_document_key(path)] = sorted(str(uid) for uid in uids)
    config["collapsed"] = by_document
    save_config(config)
