"""JSON file backed key/value store for the resolver caches."""

from __future__ import annotations

import json
import logging
import os
import tempfile

from bowishlist.errors import CacheCorruptError, CacheNotFoundError, CacheWriteError

logger = logging.getLogger(__name__)


class CacheStore:
    """
    Persist flat string -> string mappings as JSON files under one directory.

    Notes:
        - A missing file raises CacheNotFoundError so callers can start empty.
        - A present file that is not a JSON object of strings raises
          CacheCorruptError; it is never silently discarded.
        - save() writes to a temp file in the same directory and replaces the
          target, so a crash mid-write leaves the previous file intact.
    """

    def __init__(self, directory: str = ".") -> None:
        self._directory = directory

    @property
    def directory(self) -> str:
        return self._directory

    def path_for(self, key: str) -> str:
        return os.path.join(self._directory, key)

    def load(self, key: str) -> dict[str, str]:
        path = self.path_for(key)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError as exc:
            raise CacheNotFoundError(
                "Cache file does not exist",
                details={"path": path},
                cause=exc,
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CacheCorruptError(
                "Could not read cache file",
                details={"path": path},
                cause=exc,
            ) from exc

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise CacheCorruptError(
                "Error parsing cache file",
                details={"path": path},
                cause=exc,
            ) from exc

        if not isinstance(data, dict):
            raise CacheCorruptError(
                "Cache file must contain a JSON object",
                details={"path": path, "type": type(data).__name__},
            )
        for k, v in data.items():
            if not isinstance(v, str):
                raise CacheCorruptError(
                    "Cache values must be strings",
                    details={"path": path, "key": k},
                )

        logger.debug("Loaded %d entries from %s", len(data), path)
        return data

    def save(self, key: str, mapping: dict[str, str]) -> None:
        path = self.path_for(key)
        dir_path = os.path.dirname(os.path.abspath(path))
        try:
            os.makedirs(dir_path, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=dir_path)
        except OSError as exc:
            raise CacheWriteError(
                "Could not create cache file",
                details={"path": path},
                cause=exc,
            ) from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(mapping, f, indent=2, sort_keys=True)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except OSError as exc:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise CacheWriteError(
                "Could not write cache file",
                details={"path": path},
                cause=exc,
            ) from exc

        logger.debug("Saved %d entries to %s", len(mapping), path)
