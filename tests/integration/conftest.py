"""Shared fixtures for integration tests."""

from __future__ import annotations

import stat
from pathlib import Path
from textwrap import dedent

import pytest


HASH_A = "A" * 32


@pytest.fixture
def fake_nix(tmp_path: Path) -> Path:
    """Write a shell script that answers the two `nix eval` queries.

    Each answered query appends "raw" or "json" to calls.log in tmp_path.
    """
    script = tmp_path / "bin" / "nix"
    script.parent.mkdir()
    script.write_text(
        dedent(
            f"""\
            #!/bin/sh
            case "$*" in
              *--raw*) echo raw >> "{tmp_path}/calls.log"; printf '%s' "deadbeef-x86_64-linux" ;;
              *--json*) echo json >> "{tmp_path}/calls.log"; printf '%s' '["/nix/store/{HASH_A}-bash-5.2"]' ;;
              *) exit 1 ;;
            esac
            """
        )
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return script


@pytest.fixture
def failing_nix(tmp_path: Path) -> Path:
    """Write a nix stand-in that always fails with an error message."""
    script = tmp_path / "bin" / "nix"
    script.parent.mkdir()
    script.write_text("#!/bin/sh\necho 'error: flake nixpkgs not found' >&2\nexit 1\n")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return script
