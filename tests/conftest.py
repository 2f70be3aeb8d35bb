"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from hypnolint.store import InMemoryDiagnosticCollection

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

CLEAN_PROGRAM = """Focus {
    entrance {
        observe "Welcome";
    }

    induce greeting: string = "Hello";
    whisper greeting;

    suggestion double(n: number): number {
        awaken n * 2;
    }

    if (double(2) lookAtTheWatch 3) {
        observe "deep";
    } else {
        observe "shallow";
    }
} Relax"""


@pytest.fixture
def clean_program() -> str:
    """A well-formed, canonically formatted program without any diagnostics."""
    return CLEAN_PROGRAM


@pytest.fixture
def collection() -> InMemoryDiagnosticCollection:
    return InMemoryDiagnosticCollection()
