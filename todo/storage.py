"""
Local Storage

A string key/value store kept in a single JSON file, with the same
semantics as a browser's localStorage:

    storage = LocalStorage(path)
    storage.set_item("todos", "[...]")
    storage.get_item("todos")      # '[...]'
    storage.get_item("missing")    # None

Every write rewrites the whole file through a temp file that replaces the
old one. A missing file is an empty store.
"""

import json
import logging
from pathlib import Path

from todo.exceptions import StorageError

logger = logging.getLogger(__name__)


class LocalStorage:
    """String key/value store persisted to a JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        data = self._read()
        data[key] = str(value)
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    # -------------------------------------------------------------------------
    # File access
    # -------------------------------------------------------------------------
    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers both bad JSON and bytes that are not UTF-8
            raise StorageError(f"Cannot read local storage {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Local storage {self.path} is not a JSON object")
        bad_keys = [key for key, value in data.items() if not isinstance(value, str)]
        if bad_keys:
            raise StorageError(
                f"Local storage {self.path} holds non-string values for: {', '.join(bad_keys)}"
            )
        return data

    def _write(self, data: dict[str, str]) -> None:
        """Write to a sibling temp file, then swap it in so a failed write leaves the old file."""
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            tmp_path.replace(self.path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(f"Cannot write local storage {self.path}: {e}") from e
        logger.debug(f"Wrote local storage {self.path}")
