"""CLI commands for cronfmt."""

import typer
from rich.cells import cell_len
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cronfmt import __logo__, __version__
from cronfmt.config.schema import Settings
from cronfmt.cron.service import expand_cron
from cronfmt.cron.types import ExpandedCron
from cronfmt.errors import CronfmtError
from cronfmt.logging_config import setup_logging

EXAMPLES = """
Examples:

  $ cronfmt "*/15" 0 1,15 "*" 1-5 "/usr/bin/find / -type f .terraform"

  $ cronfmt "*/18" "*/3" 5,15 "*" 1-5 "/usr/bin/call-home -m 'I am alive'"

  $ cronfmt --json "*/5" 1,2,3,4,5 1 "*/4" 1-5 "/bin/cat /tmp/myHiddenFile"
"""

app = typer.Typer(
    name="cronfmt",
    help=f"{__logo__} cronfmt - Cron expression parser",
    epilog=EXAMPLES,
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} cronfmt v{__version__}")
        raise typer.Exit()


def build_table(cron: ExpandedCron) -> Table:
    """Two-column table of each field and its extended format."""
    table = Table(title="cronfmt")
    table.add_column("Cron Expression", style="cyan", no_wrap=True)
    table.add_column("Extended Format", no_wrap=True)
    for label, value in cron.rows():
        table.add_row(label, escape(value))
    return table


def table_width(cron: ExpandedCron) -> int:
    """Columns needed to show every row of `build_table` on one line."""
    rows = cron.rows()
    label_width = max(cell_len("Cron Expression"), *(cell_len(label) for label, _ in rows))
    value_width = max(cell_len("Extended Format"), *(cell_len(value) for _, value in rows))
    # three box edges plus one cell of padding each side of both columns
    return label_width + value_width + 7


@app.command(
    context_settings={"ignore_unknown_options": True, "help_option_names": ["-h", "--help"]},
)
def main(
    args: list[str] | None = typer.Argument(
        None,
        metavar="MINUTE HOUR DAY_OF_MONTH MONTH DAY_OF_WEEK COMMAND",
        help="Five cron time fields followed by the command",
        show_default=False,
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the expansion as JSON"),
    version: bool = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True
    ),
):
    """Parse a cron expression and print its extended space-separated format."""
    settings = Settings()
    setup_logging(settings.log_level)

    try:
        cron = expand_cron(args or [])
    except CronfmtError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    if as_json or settings.output == "json":
        typer.echo(cron.model_dump_json(by_alias=True, indent=2))
        return

    # Rows never wrap; widen the output past the terminal instead
    width = table_width(cron)
    out = console if width <= console.width else Console(width=width)
    out.print(build_table(cron))
