"""nix-path-pkgs - Report the packages your PATH adds on top of nixpkgs stdenv.

This library walks $PATH, maps each /nix/store directory to a package name,
and drops everything that belongs to the stdenv closure. The closure is
fetched from `nix eval` and cached per nixpkgs revision and platform.

Example:
    >>> import os
    >>> from nix_path_pkgs import ClosureResolver, Settings, find_extra_packages
    >>> settings = Settings.from_environ(os.environ)
    >>> resolver = ClosureResolver.from_settings(settings)
    >>> find_extra_packages(settings.search_path, resolver)  # doctest: +SKIP
    ['git', 'ripgrep']
"""

from nix_path_pkgs.adapters.cache import FileCache
from nix_path_pkgs.adapters.evaluator import NixEvaluator
from nix_path_pkgs.config import Settings, parse_ttl, resolve_cache_dir
from nix_path_pkgs.core.exceptions import (
    CacheError,
    CacheWriteError,
    EvaluatorError,
    NixPathPkgsError,
)
from nix_path_pkgs.core.models import (
    DEFAULT_EXCLUSIONS,
    CacheWriteResult,
    ParsedPackage,
    PruneResult,
)
from nix_path_pkgs.core.ports import ClosureCachePort, EvaluatorPort
from nix_path_pkgs.core.reconcile import reconcile
from nix_path_pkgs.core.services import ClosureResolver, find_extra_packages
from nix_path_pkgs.core.store_path import (
    parse_closure_hashes,
    parse_store_path,
    strip_version,
)


__version__ = "0.1.0"

__all__ = [
    "DEFAULT_EXCLUSIONS",
    "CacheError",
    "CacheWriteError",
    "CacheWriteResult",
    "ClosureCachePort",
    "ClosureResolver",
    "EvaluatorError",
    "EvaluatorPort",
    "FileCache",
    "NixEvaluator",
    "NixPathPkgsError",
    "ParsedPackage",
    "PruneResult",
    "Settings",
    "__version__",
    "find_extra_packages",
    "parse_closure_hashes",
    "parse_store_path",
    "parse_ttl",
    "reconcile",
    "resolve_cache_dir",
    "strip_version",
]
