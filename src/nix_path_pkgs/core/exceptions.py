"""Domain exceptions for nix-path-pkgs.

All library errors inherit from NixPathPkgsError, allowing callers to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class NixPathPkgsError(Exception):
    """Base class for all nix-path-pkgs exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class EvaluatorError(NixPathPkgsError):
    """Raised when the package evaluator cannot produce the base closure.

    This is fatal: without the closure there is no safe way to decide
    which PATH entries belong to the base environment.

    Attributes:
        command: The argument vector that was run.
        returncode: Exit status, or None if the process never started.
        stderr: Captured standard error of the process.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
        cause: Exception | None = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the nix installation or the evaluation itself."""
        if self.returncode is None:
            return f"Make sure '{self.command[0]}' is installed and on PATH"
        return f"Run `{' '.join(self.command)}` manually to inspect the failure"


class CacheError(NixPathPkgsError):
    """Base class for cache-related errors."""

    pass


class CacheWriteError(CacheError):
    """A cache entry could not be persisted.

    Returned inside CacheWriteResult rather than raised: the closure is
    still usable even when it cannot be cached.

    Attributes:
        key: The cache key being written.
        path: The cache file path.
        cause: The underlying OSError.
    """

    def __init__(
        self,
        message: str,
        key: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.key = key
        self.path = path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking permissions on the cache directory."""
        return f"Check that {self.path.parent} is writable"
