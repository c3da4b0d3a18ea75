"""Persistent key-value stores holding the debug flags.

The configurator only talks to the `KeyValueStore` protocol, so hosts can plug
in whatever preferences backend they have. Two implementations ship here:

- `MemoryStore`: a plain dict, durable as soon as written
- `JsonFileStore`: a JSON object on disk, written atomically on `flush`
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from aiofiles import open as aiopen
from aiofiles import os as aios

from .models import PlainTypes, StoreError

if TYPE_CHECKING:
    import logging

__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore"]


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal interface of a process-wide preferences store."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for `key`, or `default` if absent."""

    def set(self, key: str, value: Any) -> None:
        """Store `value` under `key`."""

    def remove(self, key: str) -> None:
        """Remove `key`, silently ignoring missing keys."""

    def flush(self) -> None:
        """Make pending writes durable."""

    def snapshot(self) -> dict[str, Any]:
        """Return a copy of the current contents."""

    def __contains__(self, key: object) -> bool: ...


class MemoryStore:
    """Dict backed store, writes are durable immediately."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})
        self.flush_count = 0

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def flush(self) -> None:
        """Nothing to write, only count the call."""
        self.flush_count += 1

    def snapshot(self) -> dict[str, Any]:
        return dict(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"MemoryStore({self._data!r})"


class JsonFileStore(MemoryStore):
    """Store persisted as a single JSON object.

    Changes stay in memory until `flush` rewrites the whole document. The file
    is replaced atomically, so readers never see a partial document.
    """

    def __init__(self, path: str | Path, initial: dict[str, PlainTypes] | None = None, log: logging.Logger | None = None) -> None:
        super().__init__(initial)
        self.path = Path(os.path.expandvars(str(path))).expanduser()
        self.log = log
        self.dirty = False

    @classmethod
    def open(cls, path: str | Path, log: logging.Logger | None = None) -> JsonFileStore:
        """Load the store from `path` (missing file gives an empty store)."""
        store = cls(path, log=log)
        if store.path.exists():
            store._data = store._parse(store.path.read_bytes())
        elif log:
            log.debug("No store at %s, starting empty", store.path)
        return store

    @classmethod
    async def aopen(cls, path: str | Path, log: logging.Logger | None = None) -> JsonFileStore:
        """Async version of `open`, for hosts running an event loop."""
        store = cls(path, log=log)
        if await aios.path.exists(store.path):
            async with aiopen(store.path, "rb") as f:
                store._data = store._parse(await f.read())
        elif log:
            log.debug("No store at %s, starting empty", store.path)
        return store

    def _parse(self, raw: bytes) -> dict[str, Any]:
        """Decode a store document.

        Raises:
            StoreError: if the content isn't a UTF-8 JSON object
        """
        try:
            text = raw.decode("utf-8")
            if not text.strip():
                return {}
            data = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            if self.log:
                self.log.error("Corrupted store %s: %s", self.path, e)
            raise StoreError(f"{self.path}: {e}") from e
        if not isinstance(data, dict):
            if self.log:
                self.log.error("Store %s must contain a JSON object, got %s", self.path, type(data).__name__)
            raise StoreError(f"{self.path}: not a JSON object")
        return data

    def set(self, key: str, value: Any) -> None:
        super().set(key, value)
        self.dirty = True

    def remove(self, key: str) -> None:
        if key in self._data:
            super().remove(key)
            self.dirty = True

    def flush(self) -> None:
        """Write the document to disk, unless it is already up to date.

        An existing file keeps its permissions.

        Raises:
            OSError: if the folder or file can't be written
        """
        super().flush()
        if not self.dirty and self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, sort_keys=True)
                f.write("\n")
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        self.dirty = False
        if self.log:
            self.log.debug("Flushed %d keys to %s", len(self._data), self.path)

    def __repr__(self) -> str:
        return f"JsonFileStore({str(self.path)!r})"
