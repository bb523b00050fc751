"""Core domain services for nix-path-pkgs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nix_path_pkgs.core.models import CACHE_RETENTION_SECONDS
from nix_path_pkgs.core.reconcile import reconcile
from nix_path_pkgs.core.store_path import parse_closure_hashes


if TYPE_CHECKING:
    from collections.abc import Set
    from pathlib import Path

    from nix_path_pkgs.config import Settings
    from nix_path_pkgs.core.ports import ClosureCachePort, EvaluatorPort


logger = logging.getLogger(__name__)


class ClosureResolver:
    """Produces the base-closure hash set, going to the evaluator only on a miss."""

    def __init__(
        self,
        evaluator: EvaluatorPort,
        cache: ClosureCachePort,
        ttl: int,
        retention: int = CACHE_RETENTION_SECONDS,
    ) -> None:
        self._evaluator = evaluator
        self._cache = cache
        self._ttl = ttl
        self._retention = retention

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        evaluator: EvaluatorPort | None = None,
        cache_dir: Path | None = None,
    ) -> ClosureResolver:
        """Create a resolver with the default nix and file-cache adapters.

        Args:
            settings: Resolved runtime configuration.
            evaluator: Evaluator to use instead of the nix CLI.
            cache_dir: Cache directory overriding settings.cache_dir.

        Returns:
            ClosureResolver wired to NixEvaluator and FileCache.
        """
        from nix_path_pkgs.adapters.cache import FileCache
        from nix_path_pkgs.adapters.evaluator import NixEvaluator

        return cls(
            evaluator=evaluator if evaluator is not None else NixEvaluator(),
            cache=FileCache(cache_dir if cache_dir is not None else settings.cache_dir),
            ttl=settings.ttl,
        )

    @property
    def caching_enabled(self) -> bool:
        """Whether this resolver reads and writes the cache at all."""
        return self._ttl != 0

    def payload(self) -> bytes:
        """Return the raw closure payload, from cache when fresh.

        Raises:
            EvaluatorError: If the evaluator has to be consulted and fails.
        """
        if not self.caching_enabled:
            logger.debug("Cache disabled (ttl=0), evaluating closure")
            return self._evaluator.closure()

        key = self._evaluator.identity()
        if key is None:
            logger.debug("Could not derive cache key, evaluating without cache")
            return self._evaluator.closure()

        cached = self._cache.get(key, self._ttl)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        logger.debug("Cache miss for %s, evaluating closure", key)
        payload = self._evaluator.closure()
        self._store(key, payload)
        return payload

    def _store(self, key: str, payload: bytes) -> None:
        """Persist a payload and sweep expired entries; failures are only logged."""
        written = self._cache.put(key, payload)
        if not written.ok:
            logger.debug("Cache write to %s failed: %s", written.path, written.error)
            return

        pruned = self._cache.prune(self._retention)
        for path in pruned.removed:
            logger.debug("Pruned expired cache file %s", path)
        for error in pruned.errors:
            logger.debug("Cache prune error: %s", error)

    def resolve(self) -> frozenset[str]:
        """Return the set of store hashes belonging to the base environment."""
        return parse_closure_hashes(self.payload())


def find_extra_packages(
    search_path: str,
    resolver: ClosureResolver,
    exclusions: Set[str] | None = None,
) -> list[str]:
    """List PATH packages outside the base closure.

    Args:
        search_path: Colon-separated directory list.
        resolver: Source of the base-closure hashes.
        exclusions: Names never reported; defaults to DEFAULT_EXCLUSIONS.

    Returns:
        Ordered, deduplicated package names.

    Raises:
        EvaluatorError: If the closure cannot be obtained.
    """
    closure = resolver.resolve()
    if exclusions is None:
        return reconcile(search_path, closure)
    return reconcile(search_path, closure, exclusions)
