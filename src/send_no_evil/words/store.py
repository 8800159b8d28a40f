"""Key-value configuration store backends."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml

from send_no_evil.config import Settings
from send_no_evil.exceptions import SettingsStoreError

logger = logging.getLogger(__name__)


def read_strv(data: dict[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        logger.warning("Ignoring malformed string list in config store (key=%s)", key)
        return None
    return list(value)


def read_boolean(data: dict[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        logger.warning("Ignoring non-boolean value in config store (key=%s)", key)
        return None
    return value


class SettingsStore(ABC):
    """Abstract interface for the configuration store the word list lives in.

    Stores hold string-list and boolean values under string keys. Reads return
    None for absent keys. Writes go through ``apply`` as one logical update and
    become durable on ``sync``.
    """

    @abstractmethod
    def read_all(self) -> dict[str, Any]:
        """Return a snapshot of every key, including writes not yet synced.

        Raises:
            SettingsStoreError: If the store cannot be read.
        """
        ...

    def get_strv(self, key: str) -> list[str] | None:
        """Return the string list stored under ``key``, or None if absent."""
        return read_strv(self.read_all(), key)

    def get_boolean(self, key: str) -> bool | None:
        """Return the boolean stored under ``key``, or None if absent."""
        return read_boolean(self.read_all(), key)

    @abstractmethod
    def apply(self, values: dict[str, Any]) -> None:
        """Write several keys as one logical update."""
        ...

    @abstractmethod
    def sync(self) -> None:
        """Flush pending writes to durable storage.

        Raises:
            SettingsStoreError: If the store cannot be written.
        """
        ...


class MemorySettingsStore(SettingsStore):
    """Dict-backed store for hosts that own persistence, and for tests."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self.sync_count = 0

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._values)

    def read_all(self) -> dict[str, Any]:
        return dict(self._values)

    def apply(self, values: dict[str, Any]) -> None:
        self._values.update(values)

    def sync(self) -> None:
        self.sync_count += 1


class YamlSettingsStore(SettingsStore):
    """Store backed by a flat YAML mapping on disk.

    A missing file is an empty store. Every read goes to the file, overlaid with
    writes staged by ``apply``; ``sync`` writes the merged mapping through a
    temporary sibling file that replaces the target.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._pending: dict[str, Any] = {}

    def _load(self) -> dict[str, Any]:
        data = self._read_file()
        data.update(self._pending)
        return data

    def _read_file(self) -> dict[str, Any]:
        if not self.path.exists():
            logger.debug("Config store file not found, starting empty (path=%s)", self.path)
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            raise SettingsStoreError(
                f"Invalid YAML syntax: {getattr(e, 'problem', None) or e}",
                file_path=str(self.path),
                line=mark.line if mark else None,
                col=mark.column if mark else None,
            ) from e
        except OSError as e:
            raise SettingsStoreError(
                f"Cannot read config store: {e}", file_path=str(self.path)
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise SettingsStoreError(
                "Config store must contain a mapping", file_path=str(self.path)
            )
        return data

    def read_all(self) -> dict[str, Any]:
        return self._load()

    def apply(self, values: dict[str, Any]) -> None:
        self._pending.update(values)

    def sync(self) -> None:
        if not self._pending:
            return
        data = self._load()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise SettingsStoreError(
                f"Cannot write config store: {e}", file_path=str(self.path)
            ) from e
        self._pending.clear()
        logger.debug("Config store synced (path=%s, keys=%d)", self.path, len(data))


def open_store(settings: Settings) -> YamlSettingsStore:
    """Open the YAML configuration store at the location named by ``settings``."""
    return YamlSettingsStore(settings.get_store_path())
