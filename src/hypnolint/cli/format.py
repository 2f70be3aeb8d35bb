from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from hypnolint.cli.files import read_sources
from hypnolint.core.formatter import format_text
from hypnolint.core.language import LanguageConfig

console = Console()


def format_files(
    paths: Annotated[list[Path], typer.Argument(help="HypnoScript files or directories to format.")],
    check: Annotated[bool, typer.Option("--check", help="Exit 1 if any file would be reformatted.")] = False,
    stdout: Annotated[bool, typer.Option("--stdout", help="Print formatted text instead of writing files.")] = False,
    indent_width: Annotated[int, typer.Option(min=1, help="Spaces per indentation level.")] = 4,
) -> None:
    """Re-indent HypnoScript files in place."""
    config = LanguageConfig(indent_width=indent_width)
    changed: list[Path] = []
    for path, text in read_sources(paths):
        formatted = format_text(text, config)
        if stdout:
            typer.echo(formatted, nl=not formatted.endswith("\n"))
            continue
        if formatted == text:
            continue
        changed.append(path)
        if check:
            console.print(f"[yellow]Would reformat[/yellow] {path}")
        else:
            path.write_text(formatted, encoding="utf-8")
            console.print(f"[green]Reformatted[/green] {path}")

    if stdout:
        return
    console.print(f"{len(changed)} file(s) {'would be ' if check else ''}reformatted")
    if check and changed:
        raise typer.Exit(1)
