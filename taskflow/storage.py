# -*- coding: utf-8 -*-

"""
TaskFlow - Key-Value Storage.

Two backends with the same contract:
- InMemoryStorage: values kept as JSON text in a dict (no I/O)
- JsonFileStorage: one JSON object on disk, rewritten on every mutation (aiofiles)

Values always round-trip through JSON, so callers get structural copies
and never share references with the store.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import aiofiles
from loguru import logger

from taskflow.exceptions import StorageError


def _encode(key: str, value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise StorageError(f"Failed to save data to storage under '{key}': {e}") from e


class InMemoryStorage:
    """In-memory key-value store with JSON round-trip semantics."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    async def save(self, key: str, value: Any) -> None:
        self._data[key] = _encode(key, value)

    async def load(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def clear(self) -> None:
        self._data.clear()


class JsonFileStorage:
    """
    Key-value store persisted as a single JSON object.

    A missing file is an empty store. A file that cannot be read or parsed
    raises StorageError on load; mutations replace such a file with a fresh
    object so the store can recover.
    """

    def __init__(self, storage_path: str = "tasks.json"):
        self._storage_path = Path(storage_path)

    async def _read(self) -> Dict[str, Any]:
        if not self._storage_path.exists():
            return {}
        try:
            async with aiofiles.open(self._storage_path, "r", encoding="utf-8") as f:
                data = json.loads(await f.read())
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Failed to load data from {self._storage_path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self._storage_path} does not contain a JSON object")
        return data

    async def _read_for_write(self) -> Dict[str, Any]:
        try:
            return await self._read()
        except StorageError as e:
            logger.warning(f"Discarding unreadable storage file: {e}")
            return {}

    async def _write(self, data: Dict[str, Any]) -> None:
        try:
            self._storage_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self._storage_path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(data, indent=2, ensure_ascii=False))
        except OSError as e:
            raise StorageError(f"Failed to write {self._storage_path}: {e}") from e

    async def save(self, key: str, value: Any) -> None:
        encoded = _encode(key, value)
        data = await self._read_for_write()
        data[key] = json.loads(encoded)
        await self._write(data)
        logger.debug(f"Saved key '{key}' to {self._storage_path}")

    async def load(self, key: str) -> Optional[Any]:
        return (await self._read()).get(key)

    async def remove(self, key: str) -> None:
        data = await self._read_for_write()
        if key in data:
            del data[key]
            await self._write(data)

    async def clear(self) -> None:
        if self._storage_path.exists():
            await self._write({})
