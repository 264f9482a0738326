"""Key-value text stores for board state."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class StorageError(Exception):
    """A storage read or write failed."""


class Storage(Protocol):
    """Text store keyed by name. Both methods may raise."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, text: str) -> None: ...


class MemoryStorage:
    """Dict-backed store, lost when the process exits."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, text: str) -> None:
        self.data[key] = text


class FileStorage:
    """One ``<key>.json`` file per key inside a directory.

    Writes go to a temporary file that replaces the target, so readers
    never see a half-written document.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory).expanduser()

    def path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise StorageError(f"invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"cannot read {path}: {e}") from e

    def set(self, key: str, text: str) -> None:
        path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.replace(tmp, path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"cannot write {path}: {e}") from e
        logger.debug("wrote %d bytes to %s", len(text), path)
