from collections.abc import Sequence
from pathlib import Path

import typer
from rich.console import Console

from hypnolint.core.language import is_source_file, iter_source_files

console = Console(stderr=True)


def read_sources(paths: Sequence[Path]) -> list[tuple[Path, str]]:
    """Read every HypnoScript file named by ``paths``; exits with code 2 on bad input."""
    sources: list[tuple[Path, str]] = []
    for path in iter_source_files(paths):
        if not path.exists():
            console.print(f"[red]No such file:[/red] {path}")
            raise typer.Exit(2)
        if not is_source_file(path):
            console.print(f"[red]Not a HypnoScript file:[/red] {path}")
            raise typer.Exit(2)
        try:
            sources.append((path, path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as exc:
            console.print(f"[red]Cannot read {path}:[/red] {exc}")
            raise typer.Exit(2) from exc
    if not sources:
        console.print("[yellow]No HypnoScript files found.[/yellow]")
    return sources
