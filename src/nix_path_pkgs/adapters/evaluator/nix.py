"""Nix CLI adapter implementing EvaluatorPort."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from nix_path_pkgs.core.exceptions import EvaluatorError


if TYPE_CHECKING:
    from collections.abc import Sequence


logger = logging.getLogger(__name__)


IDENTITY_EXPR = (
    '"${(builtins.getFlake "nixpkgs").rev}-${builtins.currentSystem}"'
)

CLOSURE_EXPR = """
with builtins.getFlake "nixpkgs";
with legacyPackages.${builtins.currentSystem};
lib.filter lib.isDerivation stdenv.allowedRequisites
"""


class NixEvaluator:
    """Evaluates the nixpkgs stdenv closure by shelling out to `nix eval`.

    No timeout is applied; a hanging nix hangs the caller.
    """

    def __init__(self, nix: str = "nix") -> None:
        """Initialize the evaluator.

        Args:
            nix: Name or path of the nix executable.
        """
        self.nix = nix

    def _command(self, *args: str) -> list[str]:
        return [self.nix, "eval", "--impure", *args]

    @property
    def identity_command(self) -> list[str]:
        """Argument vector for the revision-platform query."""
        return self._command("--raw", "--expr", IDENTITY_EXPR)

    @property
    def closure_command(self) -> list[str]:
        """Argument vector for the full closure query."""
        return self._command("--json", "--expr", CLOSURE_EXPR)

    def _run(self, command: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
        return subprocess.run(command, capture_output=True, check=False)

    def identity(self) -> str | None:
        """Return "<nixpkgs rev>-<system>", or None if nix cannot tell."""
        try:
            proc = self._run(self.identity_command)
        except OSError as e:
            logger.debug("Could not run %s: %s", self.nix, e)
            return None

        if proc.returncode != 0:
            logger.debug(
                "Identity query exited with %d: %s",
                proc.returncode,
                proc.stderr.decode("utf-8", errors="replace").strip(),
            )
            return None

        try:
            key = proc.stdout.decode("utf-8").strip()
        except UnicodeDecodeError:
            return None
        return key or None

    def closure(self) -> bytes:
        """Return the JSON array of stdenv allowed-requisite store paths.

        Raises:
            EvaluatorError: If nix cannot be started or exits non-zero.
        """
        command = self.closure_command
        try:
            proc = self._run(command)
        except OSError as e:
            raise EvaluatorError(
                f"Failed to run `{self.nix}`: {e}",
                command=command,
                cause=e,
            ) from e

        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace").strip()
            raise EvaluatorError(
                f"nix eval failed with exit status {proc.returncode}:\n{stderr}",
                command=command,
                returncode=proc.returncode,
                stderr=stderr,
            )

        return proc.stdout
