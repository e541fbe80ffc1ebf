"""Builders for formula metadata used across tests."""

from bundlegate.core.formulae.types import FormulaInfo


def core_formula(name: str, *, bottled: bool) -> FormulaInfo:
    """Return FormulaInfo for a homebrew/core formula."""
    return FormulaInfo(
        name=name,
        full_name=name,
        tap="homebrew/core",
        official_tap=True,
        bottled=bottled,
    )


def third_party_formula(name: str, tap: str, *, bottled: bool) -> FormulaInfo:
    """Return FormulaInfo for a formula from a non-Homebrew tap."""
    return FormulaInfo(
        name=name,
        full_name=f"{tap}/{name}",
        tap=tap,
        official_tap=False,
        bottled=bottled,
    )
