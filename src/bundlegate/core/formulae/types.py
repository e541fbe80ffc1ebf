"""Type definitions for formula metadata."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormulaInfo:
    """Metadata about a formula relevant to install decisions."""

    name: str
    full_name: str
    tap: str | None  # e.g. "homebrew/core"; None for formulae loaded from a path
    official_tap: bool  # maintained in a Homebrew-owned tap
    bottled: bool  # a bottle exists for the running platform
