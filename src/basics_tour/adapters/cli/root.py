"""The ``basics-tour`` command group.

Global options are resolved here, once per run: the services factory in
``ctx.obj`` is called, configuration is loaded for ``--profile`` and patched
with ``--set``, logging starts, and a :class:`~.context.CLIContext` replaces
the factory for the subcommands. A bare ``basics-tour`` prints the report.

Contents:
    * :func:`cli` - root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from basics_tour import __init__conf__
from basics_tour.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from basics_tour.composition import AppServices


def _services_from(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()  # type: ignore[no-any-return]  # Click types obj as Any


def _effective_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load config for *profile* and lay the ``--set`` values over it.

    Raises:
        click.BadParameter: The profile name is unsafe.
        click.UsageError: An override is malformed or nests under a scalar.
    """
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    try:
        return apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'classroom')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. declarations.name=Gophers",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare shared state, then run the subcommand or print the report.

    Example:
        >>> from click.testing import CliRunner
        >>> from basics_tour.composition import build_production
        >>> result = CliRunner().invoke(cli, [], obj=build_production)  # doctest: +SKIP
        >>> result.stdout.splitlines()[1]  # doctest: +SKIP
        'Hello, Go!'
    """
    services = _services_from(ctx)
    config = _effective_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        _print_default_report(ctx)


def _print_default_report(ctx: click.Context) -> None:
    from .commands.report import cli_report

    ctx.invoke(cli_report)


# Command modules import this package, so they are attached after ``cli`` exists.
def _register_commands() -> None:
    from .commands import (
        cli_config,
        cli_declarations,
        cli_fail,
        cli_hello,
        cli_info,
        cli_report,
    )

    for command in (cli_report, cli_declarations, cli_hello, cli_info, cli_config, cli_fail):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
