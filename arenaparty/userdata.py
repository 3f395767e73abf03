"""Persistent per-user settings and statistics."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


class UserDefaults:
    """A small key/value store of integers and booleans, optionally backed by a JSON file.

    Every change is written through to the file at once when a path is given.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._values: dict[str, int | bool] = {}
        if self._path is not None and self._path.exists():
            with self._path.open(encoding="utf-8") as fh:
                data = json.load(fh)
            if not isinstance(data, dict):
                raise ValueError(f"{self._path}: expected a JSON object")
            for key, value in data.items():
                if not isinstance(value, (int, bool)):
                    raise ValueError(f"{self._path}: value of {key!r} is not an integer or boolean")
                self._values[str(key)] = value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._values.get(key)
        return default if value is None else int(value)

    def set_int(self, key: str, value: int) -> None:
        self._values[key] = int(value)
        self.flush()

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._values.get(key)
        return default if value is None else bool(value)

    def set_bool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)
        self.flush()

    def init_int(self, key: str, value: int = 0) -> None:
        """Store ``value`` unless the key already holds a non-zero integer."""
        if not self.get_int(key):
            self.set_int(key, value)

    def init_bool(self, key: str, value: bool = False) -> None:
        """Store ``value`` unless the key already holds ``True``."""
        if not self.get_bool(key):
            self.set_bool(key, value)

    def flush(self) -> None:
        """Write the current values to the backing file, if there is one."""
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".userdata-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self._values, fh, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def record_game_over(store: UserDefaults) -> None:
    """Fold the result of a finished round into the player's career statistics."""
    players_left = store.get_int("_numOfPlayer")
    if players_left == 1:
        store.set_int("_winTimes", store.get_int("_winTimes") + 1)
    store.set_int("_gameTimes", store.get_int("_gameTimes") + 1)
    store.set_int("_killNums", store.get_int("_hitNum") + store.get_int("_killNums"))
    if players_left <= 5:
        store.set_int("_cupNums", 6 + players_left + store.get_int("_cupNums"))