"""Reconcile the live search path against the base closure."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nix_path_pkgs.core.models import DEFAULT_EXCLUSIONS
from nix_path_pkgs.core.store_path import parse_store_path


if TYPE_CHECKING:
    from collections.abc import Iterator, Set


PATH_SEPARATOR = ":"


def iter_search_path(search_path: str) -> Iterator[str]:
    """Yield the non-empty directories of a colon-separated search path."""
    for entry in search_path.split(PATH_SEPARATOR):
        if entry:
            yield entry


def reconcile(
    search_path: str,
    closure: Set[str],
    exclusions: Set[str] = DEFAULT_EXCLUSIONS,
) -> list[str]:
    """List packages on the search path that are not part of the base closure.

    Args:
        search_path: Colon-separated directory list (the value of $PATH).
        closure: Store hashes belonging to the base environment.
        exclusions: Package names that are never reported.

    Returns:
        Package names in order of first appearance, without duplicates.
        Entries outside the store, in the closure, excluded, or with an
        empty name are skipped.

    Example:
        >>> reconcile("/nix/store/" + "b" * 32 + "-git-2.40.1/bin:/usr/bin", set())
        ['git']
    """
    ordered: list[str] = []
    seen: set[str] = set()

    for entry in iter_search_path(search_path):
        parsed = parse_store_path(entry)
        if parsed is None:
            continue
        if parsed.hash in closure or parsed.name in exclusions or not parsed.name:
            continue
        if parsed.name not in seen:
            seen.add(parsed.name)
            ordered.append(parsed.name)

    return ordered
