"""Fixtures for end-to-end tests over a small HypnoScript project on disk."""

from pathlib import Path

import pytest

SOURCES = {
    "main.hyp": (
        "Focus {\n"
        "entrance {\n"
        'observe "Welcome"\n'
        "}\n"
        "induce count: number = 3;\n"
        "induce spare = 1;\n"
        "whisper count;\n"
        "} Relax\n"
    ),
    "lib/player.hypno": (
        "session Player {\n"
        "  suggestion greet() {\n"
        '      observe "hi"\n'
        "  }\n"
        "}\n"
    ),
    "lib/README.txt": "not a program\n",
}


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory with one wrapped program, one unwrapped module and a non-source file."""
    for name, text in SOURCES.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return tmp_path
