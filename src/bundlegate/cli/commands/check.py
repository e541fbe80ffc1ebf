"""Check command implementation - reports which entries would be skipped."""

import click

from bundlegate.cli.json_output import emit_json
from bundlegate.cli.json_schemas import CheckCommandResponse, EntryDecisionInfo
from bundlegate.cli.output import machine_output
from bundlegate.core.context import BundleGateContext
from bundlegate.core.entry import Entry, EntryType, build_entry
from bundlegate.core.skipper import Skipper


def _build_entries(
    ctx: BundleGateContext,
    entry_type: EntryType,
    names: tuple[str, ...],
    full_name: str | None,
    entry_id: str | None,
) -> list[Entry]:
    if (full_name is not None or entry_id is not None) and len(names) != 1:
        ctx.feedback.error("Error: --full-name and --id need exactly one NAME")
        raise SystemExit(1)

    try:
        return [
            build_entry(entry_type, name, full_name=full_name, entry_id=entry_id)
            for name in names
        ]
    except ValueError as e:
        ctx.feedback.error(f"Error: {e}")
        raise SystemExit(1) from None


@click.command("check")
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--type",
    "entry_type",
    type=click.Choice([t.value for t in EntryType]),
    default=EntryType.BREW.value,
    show_default=True,
    help="Entry type of NAMES",
)
@click.option("--full-name", help="Tap-qualified name of a brew or cask entry")
@click.option("--id", "entry_id", help="App Store id of a mas entry")
@click.option(
    "--failed-tap",
    "failed_taps",
    multiple=True,
    help="Treat TAP as having failed to install (repeatable)",
)
@click.option("--silent", is_flag=True, help="Do not warn about skipped entries")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def check_cmd(
    ctx: BundleGateContext,
    names: tuple[str, ...],
    entry_type: str,
    full_name: str | None,
    entry_id: str | None,
    failed_taps: tuple[str, ...],
    silent: bool,
    output_json: bool,
) -> None:
    """Report whether each NAME would be installed or skipped."""
    entries = _build_entries(ctx, EntryType(entry_type), names, full_name, entry_id)

    skipper = Skipper.from_context(ctx)
    for tap in failed_taps:
        skipper.tap_failed(tap)

    results: list[EntryDecisionInfo] = []
    for entry in entries:
        decision = skipper.evaluate(entry, silent=silent)
        results.append(
            EntryDecisionInfo(
                type=entry.entry_type.value,
                name=entry.name,
                skip=decision.skip,
                source=decision.source.value if decision.source else None,
                reason=decision.reason,
                failed_tap=skipper.failed_taps.blocking_tap(entry),
            )
        )

    if output_json:
        response = CheckCommandResponse(
            entries=results,
            failed_taps=list(skipper.failed_taps.failed_taps),
        )
        emit_json(response.model_dump(mode="json"))
        return

    for result in results:
        verdict = "skip" if result.skip else "install"
        machine_output(f"{verdict}\t{result.name}")
