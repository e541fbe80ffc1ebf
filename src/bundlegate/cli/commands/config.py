"""Config commands - inspect and initialize bundlegate configuration."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bundlegate.cli.json_output import emit_json
from bundlegate.cli.json_schemas import ConfigShowResponse, SkipListInfo
from bundlegate.cli.output import user_output
from bundlegate.core.bottling import BottlingRule
from bundlegate.core.context import BundleGateContext
from bundlegate.core.entry import EntryType
from bundlegate.core.global_config import GlobalConfig
from bundlegate.core.skip_config import DEFAULT_ENV_PREFIX, env_var_name


def _skip_list_infos(ctx: BundleGateContext) -> list[SkipListInfo]:
    prefix = ctx.skip_config.prefix
    configured = set(ctx.skip_config.configured_types())
    infos: list[SkipListInfo] = []
    for entry_type in EntryType:
        skip_list = ctx.skip_config.skip_list_for(entry_type)
        infos.append(
            SkipListInfo(
                type=entry_type.value,
                env_var=env_var_name(entry_type, prefix),
                configured=entry_type in configured,
                ids=sorted(skip_list or []),
            )
        )
    return infos


@click.group("config")
def config_group() -> None:
    """Inspect or initialize bundlegate configuration."""
    pass


@config_group.command("show")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def show_cmd(ctx: BundleGateContext, output_json: bool) -> None:
    """Show skip lists and platform facts in effect."""
    skip_lists = _skip_list_infos(ctx)
    platform_rule = BottlingRule(ctx.host, ctx.formulae).platform_reason()

    if output_json:
        response = ConfigShowResponse(
            config_path=str(ctx.config_store.path()),
            config_exists=ctx.config_store.exists(),
            env_prefix=ctx.skip_config.prefix,
            homebrew_prefix=str(ctx.host.homebrew_prefix()),
            default_prefix=ctx.host.is_default_prefix(),
            platform_rule=platform_rule,
            skip_lists=skip_lists,
        )
        emit_json(response.model_dump(mode="json"))
        return

    user_output(f"Config file: {ctx.config_store.path()}")
    user_output(f"Homebrew prefix: {ctx.host.homebrew_prefix()}")
    if platform_rule is None:
        user_output("Bottle check: inactive")
    elif not ctx.host.is_default_prefix():
        user_output(f"Bottle check: inactive ({platform_rule}, non-default prefix)")
    else:
        user_output(f"Bottle check: active ({platform_rule})")
    user_output()

    table = Table(show_header=True, header_style="bold")
    table.add_column("type", style="cyan", no_wrap=True)
    table.add_column("variable", no_wrap=True)
    table.add_column("skipped ids")

    for info in skip_lists:
        if not info.configured:
            ids_cell = "[dim]-[/dim]"
        elif not info.ids:
            ids_cell = "[dim](empty)[/dim]"
        else:
            ids_cell = " ".join(info.ids)
        table.add_row(info.type, info.env_var, ids_cell)

    console = Console(stderr=True, width=200, force_terminal=True)
    console.print(table)


@config_group.command("init")
@click.option(
    "--env-prefix",
    default=DEFAULT_ENV_PREFIX,
    show_default=True,
    help="Prefix of the <PREFIX>_<TYPE>_SKIP environment variables",
)
@click.option(
    "--homebrew-prefix",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Homebrew prefix to assume instead of detecting it",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_obj
def init_cmd(
    ctx: BundleGateContext,
    env_prefix: str,
    homebrew_prefix: Path | None,
    force: bool,
) -> None:
    """Write the global config file."""
    if ctx.config_store.exists() and not force:
        ctx.feedback.error(
            f"Error: Config already exists at {ctx.config_store.path()} (use --force to overwrite)"
        )
        raise SystemExit(1)

    config = GlobalConfig(
        env_prefix=env_prefix,
        homebrew_prefix=homebrew_prefix,
        debug=ctx.global_config.debug,
    )
    ctx.config_store.save(config)
    ctx.feedback.info(click.style("✓", fg="green") + f" Wrote {ctx.config_store.path()}")
