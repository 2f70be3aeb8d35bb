from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from hypnolint.cli.files import read_sources
from hypnolint.core.analyzer import publish
from hypnolint.core.fixes import fix_document
from hypnolint.core.messages import get_messages
from hypnolint.models import Diagnostic, Severity
from hypnolint.settings import get_locale
from hypnolint.store import InMemoryDiagnosticCollection

console = Console()

_SEVERITY_STYLE = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFORMATION: "blue",
    Severity.HINT: "dim",
}


def _render_diagnostics(uri: str, diagnostics: list[Diagnostic]) -> None:
    if not diagnostics:
        console.print(f"[green]{uri}: no problems[/green]")
        return
    table = Table(title=uri, show_lines=False)
    for header in ("line", "col", "severity", "code", "message"):
        table.add_column(header)
    for d in diagnostics:
        style = _SEVERITY_STYLE[d.severity]
        table.add_row(
            str(d.range.start.line + 1),
            str(d.range.start.column + 1),
            f"[{style}]{d.severity.name.lower()}[/{style}]",
            d.code.value if d.code else "",
            d.message,
        )
    console.print(table)


def check(
    paths: Annotated[list[Path], typer.Argument(help="HypnoScript files or directories to check.")],
    locale: Annotated[str | None, typer.Option(help="Message locale (en, de).")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print diagnostics as JSON.")] = False,
) -> None:
    """Report structural, syntax and hygiene problems. Exits 1 when any error is found."""
    messages = get_messages(locale or get_locale())
    collection = InMemoryDiagnosticCollection()
    for path, text in read_sources(paths):
        publish(collection, str(path), text, messages=messages)

    everything = [d for uri in collection.uris() for d in collection.get(uri)]
    if as_json:
        console.print_json(
            data={uri: [d.model_dump(mode="json") for d in collection.get(uri)] for uri in collection.uris()}
        )
    else:
        for uri in collection.uris():
            _render_diagnostics(uri, collection.get(uri))
        counts = {severity: sum(1 for d in everything if d.severity is severity) for severity in Severity}
        console.print(
            f"{counts[Severity.ERROR]} error(s), {counts[Severity.WARNING]} warning(s), "
            f"{counts[Severity.HINT]} hint(s)"
        )

    if any(d.severity is Severity.ERROR for d in everything):
        raise typer.Exit(1)


def fix(
    paths: Annotated[list[Path], typer.Argument(help="HypnoScript files or directories to fix.")],
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Only report which files would change.")] = False,
) -> None:
    """Apply the preferred quick fixes: missing terminators and the Focus/Relax wrapper."""
    messages = get_messages(get_locale())
    changed = 0
    for path, text in read_sources(paths):
        fixed = fix_document(text, messages=messages)
        if fixed == text:
            continue
        changed += 1
        if dry_run:
            console.print(f"[yellow]Would fix[/yellow] {path}")
        else:
            path.write_text(fixed, encoding="utf-8")
            console.print(f"[green]Fixed[/green] {path}")
    console.print(f"{changed} file(s) {'would be ' if dry_run else ''}changed")
