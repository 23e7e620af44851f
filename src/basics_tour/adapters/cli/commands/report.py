"""Report and declaration listing commands.

Contents:
    * :func:`cli_report` - Print the five report lines (also the default command).
    * :func:`cli_declarations` - List every named value with its form and type.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from basics_tour.domain.behaviors import build_report
from basics_tour.domain.declarations import Declaration, Declarations, list_declarations
from basics_tour.domain.enums import OutputFormat
from basics_tour.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _resolve_declarations(cli_ctx: CLIContext) -> Declarations:
    """Load declarations from the context config, exiting with CONFIG_ERROR on bad values."""
    try:
        return cli_ctx.services.load_declarations(cli_ctx.config)
    except ConfigurationError as exc:
        logger.debug("Invalid declarations configuration", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("report", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_report(ctx: click.Context) -> None:
    """Print the five report lines built from the declared values.

    This is what runs when the tool is started without a subcommand.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-report", extra={"command": "report"}):
        declarations = _resolve_declarations(cli_ctx)
        logger.info("Printing report", extra={"profile": cli_ctx.profile})
        for line in build_report(declarations):
            click.echo(line)


def _declaration_to_dict(row: Declaration) -> dict[str, object]:
    return {"name": row.name, "form": row.form.value, "type": row.type_name, "value": row.value}


def _render_human(rows: tuple[Declaration, ...]) -> list[str]:
    """Render rows as an aligned four-column table.

    Example:
        >>> from basics_tour.domain.declarations import DeclarationForm
        >>> row = Declaration(name="PI", form=DeclarationForm.CONSTANT, type_name="float", value=3.14159)
        >>> _render_human((row,))[1]
        'PI    constant  float  3.14159'
    """
    header = ("NAME", "FORM", "TYPE", "VALUE")
    cells = [header, *((row.name, row.form.value, row.type_name, str(row.value)) for row in rows)]
    widths = [max(len(cell[column]) for cell in cells) for column in range(len(header) - 1)]
    return [
        "  ".join([*(cell[column].ljust(widths[column]) for column in range(len(widths))), cell[-1]])
        for cell in cells
    ]


@click.command("declarations", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_declarations(ctx: click.Context, output_format: str) -> None:
    """List the variables and constants with their declaration form and type."""
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    with lib_log_rich.runtime.bind(job_id="cli-declarations", extra={"command": "declarations", "format": fmt.value}):
        rows = list_declarations(_resolve_declarations(cli_ctx))
        logger.info("Listing declarations", extra={"count": len(rows)})
        if fmt is OutputFormat.JSON:
            payload = [_declaration_to_dict(row) for row in rows]
            click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
            return
        for line in _render_human(rows):
            click.echo(line)


__all__ = ["cli_declarations", "cli_report"]
