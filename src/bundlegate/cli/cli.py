import logging
import os

import click

from bundlegate.cli.commands.check import check_cmd
from bundlegate.cli.commands.config import config_group
from bundlegate.cli.output import user_output
from bundlegate.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _configure_debug_logging() -> None:
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="bundlegate")
@click.option("--debug", is_flag=True, help="Log every skip decision to stderr")
@click.option("--quiet", "-q", is_flag=True, help="Only show errors")
@click.pass_context
def cli(ctx: click.Context, debug: bool, quiet: bool) -> None:
    """Decide which bundle entries to skip before installing them."""
    if debug or os.environ.get("BUNDLEGATE_DEBUG"):
        _configure_debug_logging()

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(quiet=quiet)
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

        if ctx.obj.global_config.debug and not debug:
            _configure_debug_logging()


cli.add_command(check_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `bundlegate` console script."""
    cli()
