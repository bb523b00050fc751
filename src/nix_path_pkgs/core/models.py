"""Core domain models for nix-path-pkgs.

These models are pure Python dataclasses with no I/O dependencies.
They represent the store paths, exclusion rules, and best-effort
cache outcomes the rest of the package passes around.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


STORE_PREFIX = "/nix/store/"
HASH_LENGTH = 32
NAME_SEPARATOR = "-"

# "/nix/store/" + 32-char hash + "-"
MIN_ENTRY_LENGTH = len(STORE_PREFIX) + HASH_LENGTH + 1

DEFAULT_TTL_SECONDS = 3600
CACHE_RETENTION_SECONDS = 86400

# Packages that show up in PATH on most shells/terminals and only add noise.
DEFAULT_EXCLUSIONS: frozenset[str] = frozenset(
    {"bash-interactive", "ghostty", "ghostty-bin"}
)


@dataclass(frozen=True, slots=True)
class ParsedPackage:
    """A PATH entry decomposed into its store hash and package name.

    Attributes:
        hash: The 32-character content identifier from the store path.
        name: Package name with its version suffix stripped.

    Example:
        >>> ParsedPackage(hash="a" * 32, name="git").name
        'git'
    """

    hash: str
    name: str


@dataclass(frozen=True, slots=True)
class CacheWriteResult:
    """Outcome of a best-effort cache write.

    Attributes:
        path: The cache file that was (or would have been) written.
        error: The failure, or None if the payload was persisted.
    """

    path: Path
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True if the payload reached disk."""
        return self.error is None


@dataclass(frozen=True, slots=True)
class PruneResult:
    """Outcome of a best-effort sweep of expired cache files.

    Attributes:
        removed: Files deleted because they outlived the retention window.
        errors: Failures hit while listing or deleting, in encounter order.
    """

    removed: list[Path] = field(default_factory=list)
    errors: list[Exception] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if the sweep completed without errors."""
        return not self.errors
