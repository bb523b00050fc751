"""CLI for nix-path-pkgs."""

from nix_path_pkgs.cli.main import app, main


__all__ = ["app", "main"]
