import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from hypnolint.cli.check import check, fix
from hypnolint.cli.format import format_files
from hypnolint.cli.outline import outline
from hypnolint.cli.serve import serve_app
from hypnolint.settings import get_log_level

app = typer.Typer(
    name="hypnolint",
    help="Check, fix and format HypnoScript source.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_log_level(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


app.command("check")(check)
app.command("fix")(fix)
app.command("format")(format_files)
app.command("outline")(outline)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
