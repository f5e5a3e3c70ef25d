"""Directory-backed connector: one JSON file per entity."""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from dataconnect.domain.connectors.base import Connector
from dataconnect.domain.errors import BackendError, InvalidKeyError
from dataconnect.infrastructure.config import settings
from dataconnect.infrastructure.connectors._keys import check_filter, check_key, matches

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_SUFFIX = ".json"


class JsonFileConnector(Connector[M, M, str], Generic[M]):
    """Stores each entity as <root>/<key>.json.

    Keys are file names: path separators, NUL bytes, ".." and a leading
    "." are rejected.  Writes go through a temporary file and os.replace, so a
    concurrent reader sees either the old or the new document.  Blocking
    file I/O runs in a worker thread.
    """

    def __init__(self, model: type[M], root: Path | str | None = None) -> None:
        self._model = model
        self._root = Path(root) if root is not None else settings.data_dir

    @property
    def root(self) -> Path:
        return self._root

    def _path(self, key: str) -> Path:
        check_key(key)
        if "/" in key or "\\" in key or os.sep in key:
            raise InvalidKeyError(key, "path separators are not allowed")
        if key.startswith("."):
            raise InvalidKeyError(key, "keys may not start with '.'")
        if "\x00" in key:
            raise InvalidKeyError(key, "NUL bytes are not allowed")
        return self._root / f"{key}{_SUFFIX}"

    def _backend_error(self, operation: str, key: Any, exc: Exception) -> BackendError:
        logger.warning("%s failed for %s in %s: %s", operation, key, self._root, exc)
        return BackendError(operation, key, str(exc))

    def _read(self, path: Path) -> M | None:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        return self._model.model_validate_json(text)

    def _write(self, path: Path, document: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(document)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _scan(self, prefix: str | None) -> list[M]:
        if not self._root.exists():
            return []
        if not self._root.is_dir():
            raise NotADirectoryError(f"connector root is not a directory: {self._root}")
        keys = sorted(
            p.name[: -len(_SUFFIX)]
            for p in self._root.iterdir()
            if p.is_file() and p.name.endswith(_SUFFIX) and not p.name.startswith(".")
        )
        entities = []
        for key in keys:
            if not matches(key, prefix):
                continue
            entity = self._read(self._root / f"{key}{_SUFFIX}")
            if entity is not None:  # removed between scan and read
                entities.append(entity)
        return entities

    async def fetch(self, id: str) -> M | None:
        path = self._path(id)
        try:
            entity = await asyncio.to_thread(self._read, path)
        except (OSError, ValidationError) as exc:
            raise self._backend_error("fetch", id, exc) from exc
        if entity is None:
            logger.debug("fetch miss: %s", path)
        return entity

    async def list(self, filter: str | None = None) -> list[M]:
        check_filter(filter)
        try:
            return await asyncio.to_thread(self._scan, filter)
        except (OSError, ValidationError) as exc:
            raise self._backend_error("list", filter, exc) from exc

    async def save(self, id: str, value: M | Mapping[str, Any]) -> None:
        path = self._path(id)
        try:
            entity = value if isinstance(value, self._model) else self._model.model_validate(value)
        except ValidationError as exc:
            raise self._backend_error("save", id, exc) from exc
        try:
            await asyncio.to_thread(self._write, path, entity.model_dump_json())
        except OSError as exc:
            raise self._backend_error("save", id, exc) from exc

    async def remove(self, id: str) -> None:
        path = self._path(id)
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as exc:
            raise self._backend_error("remove", id, exc) from exc
