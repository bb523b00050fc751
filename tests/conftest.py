"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import pytest

from nix_path_pkgs.core.exceptions import EvaluatorError


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, parsing, and services")
    config.addinivalue_line("markers", "cache: File cache adapter")
    config.addinivalue_line("markers", "evaluator: Nix evaluator adapter")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class FakeEvaluator:
    """In-memory EvaluatorPort that records how often it was asked.

    Attributes:
        key: Value returned by identity(); None simulates a failed key query.
        payload: Value returned by closure().
        fail: When True, closure() raises EvaluatorError.
    """

    def __init__(
        self,
        key: str | None = "rev123-x86_64-linux",
        payload: bytes = b"[]",
        fail: bool = False,
    ) -> None:
        self.key = key
        self.payload = payload
        self.fail = fail
        self.identity_calls = 0
        self.closure_calls = 0

    def identity(self) -> str | None:
        self.identity_calls += 1
        return self.key

    def closure(self) -> bytes:
        self.closure_calls += 1
        if self.fail:
            raise EvaluatorError(
                "nix eval failed with exit status 1:\nerror: flake not found",
                command=["nix", "eval"],
                returncode=1,
                stderr="error: flake not found",
            )
        return self.payload


@pytest.fixture
def fake_evaluator() -> FakeEvaluator:
    """Reusable fake evaluator returning an empty closure."""
    return FakeEvaluator()


@pytest.fixture
def make_evaluator() -> type[FakeEvaluator]:
    """Factory for fake evaluators with custom keys, payloads, or failures."""
    return FakeEvaluator
