"""Adapters connecting the core to nix and the filesystem."""
