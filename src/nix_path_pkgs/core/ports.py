"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from nix_path_pkgs.core.models import CacheWriteResult, PruneResult


@runtime_checkable
class EvaluatorPort(Protocol):
    """Package evaluator that knows the base environment closure (nix)."""

    def identity(self) -> str | None:
        """Return a short string identifying the evaluated environment.

        The value combines the package-set revision and the platform
        (e.g. "<rev>-x86_64-linux") and is only used as a cache key.

        Returns:
            The identity string, or None if it could not be determined.
        """
        ...

    def closure(self) -> bytes:
        """Return the raw serialized closure of the base environment.

        The payload contains zero or more store paths; its exact format is
        owned by the evaluator.

        Raises:
            EvaluatorError: If the evaluator cannot be run or fails.
        """
        ...


@runtime_checkable
class ClosureCachePort(Protocol):
    """Local store of raw closure payloads keyed by environment identity."""

    def get(self, key: str, ttl: int) -> bytes | None:
        """Return the cached payload if it is at most ttl seconds old.

        Args:
            key: Environment identity used as the cache key.
            ttl: Maximum accepted age in seconds.

        Returns:
            The raw payload, or None on a miss (absent, stale, unreadable).
        """
        ...

    def put(self, key: str, payload: bytes) -> CacheWriteResult:
        """Persist a payload under key, replacing any previous entry.

        Returns:
            A CacheWriteResult describing whether the write succeeded.
        """
        ...

    def prune(self, max_age: int) -> PruneResult:
        """Remove cache files older than max_age seconds, whatever their key.

        Returns:
            A PruneResult listing removed files and any errors hit.
        """
        ...
