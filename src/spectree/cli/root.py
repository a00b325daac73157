"""Top-level Click group wiring together all spectree commands."""

from __future__ import annotations

import logging
import sys

import click

from spectree import __version__

# Threshold for -vv to map to DEBUG
VERBOSE_DEBUG_THRESHOLD = 2
DEFAULT_COMMAND = "show"

CLI_CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}


class _DefaultShowGroup(click.Group):
    """Click group that falls back to the show command when none is provided."""

    def resolve_command(
        self,
        ctx: click.Context,
        args: list[str],
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is not None:
            return super().resolve_command(ctx, args)
        show_cmd = self.get_command(ctx, DEFAULT_COMMAND)
        if show_cmd is None:
            return super().resolve_command(ctx, args)
        return DEFAULT_COMMAND, show_cmd, list(args)


def _resolve_level(verbose: int, log_level: str | None) -> int:
    if log_level:
        return getattr(logging, log_level.upper())
    if verbose >= VERBOSE_DEBUG_THRESHOLD:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


@click.group(cls=_DefaultShowGroup, invoke_without_command=True, context_settings=CLI_CONTEXT_SETTINGS)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (use -vv for debug)")
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    help="Set log level explicitly",
)
@click.version_option(__version__, "-V", "--version")
@click.pass_context
def cli(ctx: click.Context, verbose: int, log_level: str | None) -> None:
    """Derive a directory tree from a flat list of test specs.

    If no COMMAND is given, this behaves like: spectree show [PATHS...]
    """
    logging.basicConfig(level=_resolve_level(verbose, log_level), force=True)

    # With no arguments at all click never calls resolve_command, so run the
    # default command with its defaults here.
    if ctx.invoked_subcommand is None and isinstance(ctx.command, click.Group):
        command = ctx.command.get_command(ctx, DEFAULT_COMMAND)
        if command is not None:
            ctx.invoke(command)


# Import subcommands and register them
from .count import count  # noqa: E402
from .show import show  # noqa: E402
from .version import version  # noqa: E402

cli.add_command(show)
cli.add_command(count)
cli.add_command(version)


def main(argv: list[str] | None = None) -> None:
    """Compat entry that executes the Click group with the provided argv."""
    args = list(sys.argv[1:] if argv is None else argv)
    cli.main(args=args, prog_name="spectree")
