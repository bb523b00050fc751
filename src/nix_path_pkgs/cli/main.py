"""CLI command for nix-path-pkgs."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from nix_path_pkgs.adapters.evaluator import NixEvaluator
from nix_path_pkgs.config import TTL_ENV_VAR, Settings
from nix_path_pkgs.core.exceptions import EvaluatorError
from nix_path_pkgs.core.services import ClosureResolver, find_extra_packages


app = typer.Typer(
    name="nix-path-pkgs",
    help="List packages on PATH that are not part of the nixpkgs stdenv closure.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

EXIT_FOUND = 0
EXIT_EMPTY = 1
EXIT_EVALUATOR_FAILED = 2


def _configure_logging(verbose: bool) -> None:
    """Send debug logs to stderr when verbose, stay silent otherwise."""
    if not verbose:
        return
    package_logger = logging.getLogger("nix_path_pkgs")
    package_logger.handlers = [
        RichHandler(console=Console(stderr=True), show_path=False)
    ]
    package_logger.setLevel(logging.DEBUG)


@app.command()
def run(
    ttl: int | None = typer.Option(
        None,
        "--ttl",
        help=f"Cache TTL in seconds, 0 disables caching. Defaults to ${TTL_ENV_VAR} or 3600.",
    ),
    cache_dir: Path | None = typer.Option(
        None,
        "--cache-dir",
        help="Cache directory. Defaults to $XDG_CACHE_HOME/nix-path-pkgs.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log cache and evaluator activity to stderr.",
    ),
) -> None:
    """Print PATH packages outside the base environment, comma-separated.

    Exits 1 with no output when there are none.
    """
    _configure_logging(verbose)

    settings = Settings.from_environ(os.environ)
    if ttl is not None:
        settings = replace(settings, ttl=ttl)

    resolver = ClosureResolver.from_settings(
        settings, evaluator=NixEvaluator(), cache_dir=cache_dir
    )

    try:
        packages = find_extra_packages(settings.search_path, resolver)
    except EvaluatorError as e:
        typer.echo(f"Error: {e}", err=True)
        if e.recovery_hint:
            typer.echo(f"Hint: {e.recovery_hint}", err=True)
        raise typer.Exit(EXIT_EVALUATOR_FAILED) from None

    if not packages:
        raise typer.Exit(EXIT_EMPTY)

    typer.echo(", ".join(packages))


def main() -> None:
    """Entry point for the CLI."""
    app()
