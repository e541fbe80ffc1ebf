"""Automatic skipping of formulae that would have to be built from source."""

import logging

from bundlegate.core.entry import NOT_SKIPPED, Entry, EntryType, SkipDecision, SkipSource
from bundlegate.core.formulae.abc import FormulaMetadataStore
from bundlegate.core.host.abc import Host

logger = logging.getLogger(__name__)

APPLE_SILICON_REASON = "Apple Silicon"
LINUX_REASON = "Linux"


class BottlingRule:
    """Skip official formulae that have no bottle for this platform.

    Applies only on ARM or Linux hosts with Homebrew under its default
    prefix, and only to bare formula names. Qualified names (``user/tap/name``)
    are explicit requests and are never auto-skipped.
    """

    def __init__(self, host: Host, formulae: FormulaMetadataStore) -> None:
        self._host = host
        self._formulae = formulae

    def platform_reason(self) -> str | None:
        """Return the platform this rule is active for, or None if inactive."""
        if self._host.is_arm():
            return APPLE_SILICON_REASON
        if self._host.is_linux():
            return LINUX_REASON
        return None

    def evaluate(self, entry: Entry) -> SkipDecision:
        reason = self.platform_reason()
        if reason is None:
            return NOT_SKIPPED
        if not self._host.is_default_prefix():
            return NOT_SKIPPED
        if entry.entry_type is not EntryType.BREW or entry.is_namespaced:
            return NOT_SKIPPED

        formula = self._formulae.formula_by_full_name(entry.name)
        if formula is None or not formula.official_tap or formula.bottled:
            return NOT_SKIPPED

        logger.debug("No %s bottle for %s", reason, entry.name)
        return SkipDecision(skip=True, reason=reason, source=SkipSource.PLATFORM)
