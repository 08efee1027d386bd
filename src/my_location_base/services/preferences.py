"""
User preferences (dark mode). Stored as a JSON object of string values alongside user data,
so each entry holds a JSON-encoded value: {"darkMode": "true"}.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

import anyio

from .._async import run_sync
from ..errors import StorageWriteError

logger = logging.getLogger(__name__)

DARK_MODE_KEY = "darkMode"


def load_preferences(path: Path) -> dict[str, str]:
    """Load preferences from disk. Returns dict; missing file, invalid JSON or a non-object => {}."""
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        logger.warning("Ignoring unreadable preferences file %s", path)
        return {}
    if not isinstance(data, dict):
        return {}
    return {str(k): v for k, v in data.items() if isinstance(v, str)}


def save_preferences(path: Path, prefs: dict[str, str]) -> None:
    """Save preferences to disk. Each write goes to its own temp file, then is swapped in."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, prefix=path.name + ".", suffix=".tmp", delete=False
    ) as f:
        json.dump(prefs, f, indent=2)
        tmp = Path(f.name)
    try:
        os.replace(tmp, path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def get_item(path: Path, key: str) -> str | None:
    return load_preferences(path).get(key)


def set_item(path: Path, key: str, value: str) -> None:
    prefs = load_preferences(path)
    prefs[key] = value
    save_preferences(path, prefs)


class PreferenceStore:
    """Dark-mode flag persisted in the preferences file. Writes are serialized in call order."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._write_lock = anyio.Lock()

    async def get_dark_mode(self) -> bool:
        """Stored flag, False if never set. Never raises: an unreadable value counts as unset."""
        try:
            raw = await run_sync(get_item, self.path, DARK_MODE_KEY)
        except OSError:
            logger.warning("Could not read %s; using light mode", self.path, exc_info=True)
            return False
        if raw is None:
            return False
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring invalid %s value %r", DARK_MODE_KEY, raw)
            return False
        return value is True

    async def set_dark_mode(self, value: bool) -> None:
        """Overwrite the flag. Raises StorageWriteError if the file cannot be written."""
        try:
            async with self._write_lock:
                await run_sync(set_item, self.path, DARK_MODE_KEY, json.dumps(bool(value)))
        except OSError as exc:
            raise StorageWriteError(f"Could not save {DARK_MODE_KEY}: {exc}") from exc
