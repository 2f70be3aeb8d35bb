from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.tree import Tree

from hypnolint.cli.files import read_sources
from hypnolint.core.outline import collect_symbols
from hypnolint.models import DocumentSymbol

console = Console()


def _add_symbols(tree: Tree, symbols: list[DocumentSymbol]) -> None:
    for symbol in symbols:
        lines = f"{symbol.range.start.line + 1}-{symbol.range.end.line + 1}"
        branch = tree.add(f"[bold]{symbol.name}[/bold] [dim]{symbol.kind.value}, lines {lines}[/dim]")
        _add_symbols(branch, symbol.children)


def outline(
    path: Annotated[Path, typer.Argument(help="HypnoScript file to outline.")],
) -> None:
    """Print the block structure of a HypnoScript file."""
    for source_path, text in read_sources([path]):
        tree = Tree(str(source_path))
        _add_symbols(tree, collect_symbols(text))
        console.print(tree)
