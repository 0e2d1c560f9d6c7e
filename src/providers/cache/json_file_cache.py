"""JSON file cache store.

The whole cache is one JSON object (``{"<company name>": <value>, ...}``)
rewritten in full on every write.  Writes go through a temporary sibling
file that is then ``os.replace``-d over the original, so a crash mid-write
leaves the previous version intact instead of a truncated file.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import structlog

from src.interfaces.cache_store import ICacheStore
from src.utils.errors import CacheStoreError

logger = structlog.get_logger(logger_name=__name__)


class JsonFileCacheStore(ICacheStore):
    """Cache store backed by a single UTF-8 JSON file.

    Parameters
    ----------
    path:
        Location of the cache file.  Its parent directory must exist; the
        file itself is created on first write.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # ICacheStore implementation
    # ------------------------------------------------------------------

    def load(self) -> dict[str, Any]:
        """Read the cache file, treating a missing or corrupt file as empty."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("cache_missing", path=str(self._path))
            return {}
        except UnicodeDecodeError as exc:
            logger.warning("cache_corrupt", path=str(self._path), error=str(exc))
            return {}
        except OSError as exc:
            raise CacheStoreError(
                f"Cannot read cache file {self._path}: {exc}",
                provider_name="json_cache",
            ) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("cache_corrupt", path=str(self._path), error=str(exc))
            return {}

        if not isinstance(data, dict):
            logger.warning(
                "cache_corrupt",
                path=str(self._path),
                error=f"top-level JSON is {type(data).__name__}, expected object",
            )
            return {}

        logger.debug("cache_loaded", path=str(self._path), entries=len(data))
        return data

    def put_and_persist(self, mapping: dict[str, Any], key: str, value: Any) -> None:
        """Store *value* under *key* and rewrite the whole cache file."""
        mapping[key] = value
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(mapping, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as exc:
            tmp_path.unlink(missing_ok=True)
            raise CacheStoreError(
                f"Cannot write cache file {self._path}: {exc}",
                provider_name="json_cache",
            ) from exc
        logger.debug("cache_set", key=key, entries=len(mapping))
