"""File-based cache adapter implementing ClosureCachePort."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from nix_path_pkgs.core.exceptions import CacheWriteError
from nix_path_pkgs.core.models import CacheWriteResult, PruneResult


if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


CACHE_FILE_SUFFIX = "-stdenv-allowed-requisites.json"


class FileCache:
    """Local cache of raw closure payloads, one file per environment identity.

    Freshness is judged from each file's modification time; there is no
    metadata sidecar.

    Attributes:
        cache_dir: Directory where payload files are stored.
    """

    def __init__(
        self,
        cache_dir: Path,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the cache with a directory path.

        Args:
            cache_dir: Directory where payload files will be stored.
            clock: Returns the current time as a POSIX timestamp.
        """
        self.cache_dir = cache_dir
        self._clock = clock

    def file_path(self, key: str) -> Path:
        """Get the path for a cached payload."""
        return self.cache_dir / f"{key}{CACHE_FILE_SUFFIX}"

    def _age(self, path: Path) -> float:
        """Seconds since path was last modified."""
        return self._clock() - path.stat().st_mtime

    def get(self, key: str, ttl: int) -> bytes | None:
        """Get the cached payload if it is fresh enough.

        Args:
            key: Environment identity.
            ttl: Maximum accepted age in seconds.

        Returns:
            The payload bytes, or None when the file is missing, unreadable,
            older than ttl, or timestamped in the future.
        """
        path = self.file_path(key)
        try:
            age = self._age(path)
            if age < 0 or age > ttl:
                return None
            return path.read_bytes()
        except OSError:
            return None

    def put(self, key: str, payload: bytes) -> CacheWriteResult:
        """Store a payload, creating the cache directory if needed.

        Args:
            key: Environment identity.
            payload: Raw evaluator output.

        Returns:
            CacheWriteResult whose error is a CacheWriteError on failure.
        """
        path = self.file_path(key)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload)
        except OSError as e:
            error = CacheWriteError(
                f"Could not write cache entry '{key}'",
                key=key,
                path=path,
                cause=e,
            )
            return CacheWriteResult(path=path, error=error)
        return CacheWriteResult(path=path)

    def prune(self, max_age: int) -> PruneResult:
        """Delete files older than max_age seconds, whatever their key.

        Args:
            max_age: Retention window in seconds.

        Returns:
            PruneResult with the removed paths and any errors encountered.
        """
        result = PruneResult()
        if not self.cache_dir.exists():
            return result

        try:
            entries = list(self.cache_dir.iterdir())
        except OSError as e:
            result.errors.append(e)
            return result

        for path in entries:
            try:
                if not path.is_file() or self._age(path) <= max_age:
                    continue
                path.unlink()
            except OSError as e:
                result.errors.append(e)
                continue
            result.removed.append(path)

        return result
