import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from typing import Dict

logger = logging.getLogger("bunny_maze.store")


class KeyValueStore(ABC):
    """Minimal integer key-value persistence."""

    @abstractmethod
    def get_int(self, key: str, default: int = 0) -> int:
        pass

    @abstractmethod
    def set_int(self, key: str, value: int):
        pass


class MemoryStore(KeyValueStore):
    def __init__(self, values: Dict[str, int] = None):
        self.values: Dict[str, int] = dict(values or {})

    def get_int(self, key: str, default: int = 0) -> int:
        return self.values.get(key, default)

    def set_int(self, key: str, value: int):
        self.values[key] = int(value)


class JsonFileStore(KeyValueStore):
    """
    Stores all keys in one small JSON object on disk.
    Every write replaces the whole file atomically (temp file + os.replace).
    """

    def __init__(self, filepath: str):
        self.filepath = filepath
        self._cache: Dict[str, int] = None

    def _load(self) -> Dict[str, int]:
        if self._cache is not None:
            return self._cache

        if not os.path.exists(self.filepath):
            self._cache = {}
            return self._cache

        with open(self.filepath, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid store file {self.filepath}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid store file {self.filepath}: expected a JSON object")

        self._cache = data
        return self._cache

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._load().get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Key {key!r} in {self.filepath} is not an integer")
        return value

    def set_int(self, key: str, value: int):
        data = dict(self._load())
        data[key] = int(value)

        directory = os.path.dirname(os.path.abspath(self.filepath))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(prefix=".store-", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.filepath)
        except BaseException:
            os.unlink(tmp_path)
            raise

        self._cache = data
        logger.debug(f"Saved {key}={value} to {self.filepath}")
