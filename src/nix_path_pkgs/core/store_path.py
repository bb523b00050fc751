"""Pure parsing helpers for Nix store paths.

These functions contain no I/O and are safe to use in the core domain.
"""

from __future__ import annotations

import re

from nix_path_pkgs.core.models import (
    HASH_LENGTH,
    MIN_ENTRY_LENGTH,
    NAME_SEPARATOR,
    STORE_PREFIX,
    ParsedPackage,
)


_PREFIX_BYTES = STORE_PREFIX.encode()
_SEPARATOR_BYTE = NAME_SEPARATOR.encode()
_HASH_START = len(_PREFIX_BYTES)
_HASH_END = _HASH_START + HASH_LENGTH

# First "-<digit>" marks where the version suffix begins
_VERSION_BOUNDARY = re.compile(r"-[0-9]")

# Offsets are in UTF-8 bytes. The lookahead keeps the separator unconsumed,
# so scanning resumes right after the hash.
_CLOSURE_HASH = re.compile(
    re.escape(_PREFIX_BYTES)
    + rb"(.{%d})(?=%s)" % (HASH_LENGTH, re.escape(_SEPARATOR_BYTE)),
    re.DOTALL,
)


def strip_version(item: str) -> str:
    """Cut a store item name at its version suffix.

    The cut happens at the first dash immediately followed by an ASCII
    digit, so dashes inside multi-word names survive.

    Args:
        item: Store item name with optional version (e.g., "cargo-watch-8.4.0").

    Returns:
        The package name (e.g., "cargo-watch"). Items without a version
        boundary are returned unchanged.

    Examples:
        >>> strip_version("bash-5.2-p15")
        'bash'
        >>> strip_version("rustup")
        'rustup'
    """
    match = _VERSION_BOUNDARY.search(item)
    if match is None:
        return item
    return item[: match.start()]


def parse_store_path(entry: str) -> ParsedPackage | None:
    """Decompose a PATH directory into store hash and package name.

    Args:
        entry: A directory such as "/nix/store/<hash>-bash-5.3/bin".

    Returns:
        ParsedPackage for store-shaped entries, None for anything else
        (wrong prefix, too short, or no separator after the hash).

    Examples:
        >>> parse_store_path("/nix/store/" + "a" * 32 + "-git-2.40.1/bin").name
        'git'
        >>> parse_store_path("/usr/bin") is None
        True
    """
    if not entry.startswith(STORE_PREFIX):
        return None

    raw = entry.encode("utf-8", "surrogatepass")
    if len(raw) < MIN_ENTRY_LENGTH or raw[_HASH_END : _HASH_END + 1] != _SEPARATOR_BYTE:
        return None

    # A separator byte always sits on a character boundary, so both slices decode
    store_hash = raw[_HASH_START:_HASH_END].decode("utf-8", "surrogatepass")
    item = raw[_HASH_END + 1 :].decode("utf-8", "surrogatepass").split("/", 1)[0]
    return ParsedPackage(hash=store_hash, name=strip_version(item))


def parse_closure_hashes(payload: bytes) -> frozenset[str]:
    """Extract every store hash mentioned in a raw closure payload.

    The payload is scanned as text rather than decoded as JSON, so any
    serialization that embeds store paths works.

    Args:
        payload: Raw evaluator output, e.g. b'["/nix/store/<hash>-bash-5.2", ...]'.

    Returns:
        The set of hashes. Payloads that are not UTF-8 or contain no
        store paths yield an empty set.
    """
    try:
        payload.decode("utf-8")
    except UnicodeDecodeError:
        return frozenset()

    return frozenset(
        match.group(1).decode("utf-8") for match in _CLOSURE_HASH.finditer(payload)
    )
