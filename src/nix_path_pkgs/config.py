"""Configuration utilities for nix-path-pkgs.

This module turns the process environment into an explicit Settings value
so the core never reads global state directly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from nix_path_pkgs.core.models import DEFAULT_TTL_SECONDS


if TYPE_CHECKING:
    from collections.abc import Mapping


TTL_ENV_VAR = "NIX_PATH_PKGS_CACHE_TTL"
CACHE_SUBDIR = "nix-path-pkgs"

# Plain ASCII digits with an optional sign; no padding or underscores
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_ttl(raw: str | None, default: int = DEFAULT_TTL_SECONDS) -> int:
    """Parse a TTL in whole seconds, falling back to default.

    Args:
        raw: The raw environment value, or None if unset.
        default: Value used when raw is missing or not an integer.

    Returns:
        The parsed TTL. Negative values are returned as-is.

    Example:
        >>> parse_ttl("7200")
        7200
        >>> parse_ttl("soon")
        3600
    """
    if raw is None or _INTEGER.fullmatch(raw) is None:
        return default
    return int(raw)


def resolve_cache_dir(environ: Mapping[str, str]) -> Path:
    """Find the per-user cache directory.

    Searches in the following priority order:
    1. $XDG_CACHE_HOME/nix-path-pkgs (when set and non-empty)
    2. $HOME/.cache/nix-path-pkgs
    3. ./.cache/nix-path-pkgs

    Args:
        environ: Environment mapping to read from.

    Returns:
        Path to the cache directory. It is not created here.
    """
    xdg = environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg) / CACHE_SUBDIR
    home = environ.get("HOME", ".")
    return Path(home) / ".cache" / CACHE_SUBDIR


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration.

    Attributes:
        ttl: Cache time-to-live in seconds; 0 disables the cache.
        cache_dir: Directory holding cached closure payloads.
        search_path: The colon-separated PATH to inspect.
    """

    ttl: int
    cache_dir: Path
    search_path: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> Settings:
        """Build Settings from an environment mapping.

        Args:
            environ: Typically os.environ; tests pass a plain dict.

        Returns:
            Settings with defaults applied for anything missing or invalid.
        """
        return cls(
            ttl=parse_ttl(environ.get(TTL_ENV_VAR)),
            cache_dir=resolve_cache_dir(environ),
            search_path=environ.get("PATH", ""),
        )
