"""Parsing for `brew info --json=v2` output."""

from pydantic import BaseModel, ConfigDict, Field

from bundlegate.core.formulae.types import FormulaInfo
from bundlegate.core.host.abc import Host

OFFICIAL_TAP_USER = "homebrew"

# Bottle tag codename -> first macOS release it was built for
MACOS_RELEASES: dict[str, tuple[int, ...]] = {
    "tahoe": (26,),
    "sequoia": (15,),
    "sonoma": (14,),
    "ventura": (13,),
    "monterey": (12,),
    "big_sur": (11,),
    "catalina": (10, 15),
    "mojave": (10, 14),
    "high_sierra": (10, 13),
    "sierra": (10, 12),
    "el_capitan": (10, 11),
}


class BottleSpec(BaseModel):
    """One bottle specification (``bottle.stable``)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    files: dict[str, dict[str, object]] = Field(default_factory=dict)


class FormulaJson(BaseModel):
    """The subset of a formula's JSON description used here."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    full_name: str
    tap: str | None = None
    bottle: dict[str, BottleSpec] = Field(default_factory=dict)


class BrewInfoResponse(BaseModel):
    """Top-level `brew info --json=v2` document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    formulae: list[FormulaJson] = Field(default_factory=list)


def is_official_tap(tap: str | None) -> bool:
    """Check whether ``tap`` is maintained by Homebrew itself (``homebrew/*``)."""
    if not tap:
        return False
    user, _, _ = tap.partition("/")
    return user.lower() == OFFICIAL_TAP_USER


def bottle_tag_matches_host(tag: str, host: Host) -> bool:
    """Check whether a bottle tag can be poured on ``host``.

    Tags look like ``arm64_sonoma``, ``sonoma``, ``x86_64_linux`` or ``all``.
    On macOS a bottle pours on its own release and any later one. When the
    host release or the tag's codename is unknown, only the CPU family is
    compared.
    """
    if tag == "all":
        return True
    if host.is_linux():
        arch = "arm64" if host.is_arm() else "x86_64"
        return tag == f"{arch}_linux"
    if tag.endswith("_linux"):
        return False
    if tag.startswith("arm64_") != host.is_arm():
        return False

    host_release = host.macos_version()
    bottle_release = MACOS_RELEASES.get(tag.removeprefix("arm64_"))
    if host_release is None or bottle_release is None:
        return True
    return bottle_release <= host_release


def parse_brew_info(stdout: str, host: Host) -> FormulaInfo | None:
    """Parse `brew info --json=v2 --formula NAME` output.

    Returns:
        FormulaInfo for the first formula in the document, or None if there is none

    Raises:
        pydantic.ValidationError: If stdout is not valid JSON of the expected shape
    """
    response = BrewInfoResponse.model_validate_json(stdout)
    if not response.formulae:
        return None

    formula = response.formulae[0]
    stable = formula.bottle.get("stable")
    bottled = stable is not None and any(
        bottle_tag_matches_host(tag, host) for tag in stable.files
    )
    return FormulaInfo(
        name=formula.name,
        full_name=formula.full_name,
        tap=formula.tap,
        official_tap=is_official_tap(formula.tap),
        bottled=bottled,
    )
