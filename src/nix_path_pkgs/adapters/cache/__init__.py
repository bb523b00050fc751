"""Cache adapters implementing ClosureCachePort."""

from nix_path_pkgs.adapters.cache.file_cache import FileCache


__all__ = ["FileCache"]
