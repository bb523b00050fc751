"""Core domain module for nix-path-pkgs.

This module contains pure Python domain models, parsing, and port
definitions. Apart from the resolver's logging it has no I/O and can be
tested in isolation.
"""

from nix_path_pkgs.core.models import CacheWriteResult, ParsedPackage, PruneResult
from nix_path_pkgs.core.ports import ClosureCachePort, EvaluatorPort
from nix_path_pkgs.core.reconcile import reconcile
from nix_path_pkgs.core.store_path import parse_closure_hashes, parse_store_path


__all__ = [
    "CacheWriteResult",
    "ClosureCachePort",
    "EvaluatorPort",
    "ParsedPackage",
    "PruneResult",
    "parse_closure_hashes",
    "parse_store_path",
    "reconcile",
]
