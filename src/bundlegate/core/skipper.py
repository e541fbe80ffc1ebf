"""Decide whether a bundle entry should be skipped instead of installed.

The installer asks once per manifest entry, in manifest order, before doing
anything with it. Three rule sources are consulted, first match wins:

1. Platform bottling: official formulae without a bottle for this ARM or
   Linux host would be built from source, so they are skipped.
2. Failed taps: entries namespaced under a tap that already failed to
   install this run cannot succeed either.
3. Configured skip lists: ``<PREFIX>_<TYPE>_SKIP`` environment variables,
   matched against the entry's name or alternate id.
"""

import logging
from typing import TYPE_CHECKING

from bundlegate.core.bottling import BottlingRule
from bundlegate.core.entry import NOT_SKIPPED, Entry, SkipDecision, SkipSource
from bundlegate.core.failed_taps import FailedTapRegistry
from bundlegate.core.skip_config import SkipConfig
from bundlegate.core.user_feedback import UserFeedback

if TYPE_CHECKING:
    from bundlegate.core.context import BundleGateContext

logger = logging.getLogger(__name__)


def candidate_ids(entry: Entry) -> set[str]:
    """Identifiers a skip list may use to refer to ``entry``."""
    ids = {entry.name}
    if entry.alternate_id is not None:
        ids.add(str(entry.alternate_id))
    return ids


class Skipper:
    """Skip decision engine holding the per-run caches.

    One instance lives for one bundle run. Its SkipConfig is fixed at
    construction; its FailedTapRegistry only grows, through tap_failed().
    """

    def __init__(
        self,
        *,
        config: SkipConfig,
        failed_taps: FailedTapRegistry,
        bottling: BottlingRule,
        feedback: UserFeedback,
    ) -> None:
        self._config = config
        self._failed_taps = failed_taps
        self._bottling = bottling
        self._feedback = feedback

    @staticmethod
    def from_context(ctx: "BundleGateContext") -> "Skipper":
        """Build an engine from the application context with an empty tap registry."""
        return Skipper(
            config=ctx.skip_config,
            failed_taps=FailedTapRegistry(),
            bottling=BottlingRule(ctx.host, ctx.formulae),
            feedback=ctx.feedback,
        )

    @property
    def config(self) -> SkipConfig:
        return self._config

    @property
    def failed_taps(self) -> FailedTapRegistry:
        return self._failed_taps

    def tap_failed(self, tap: str) -> None:
        """Record that ``tap`` failed to install; its entries will be skipped."""
        self._failed_taps.register_failure(tap)

    def decide(self, entry: Entry) -> SkipDecision:
        """Evaluate ``entry`` against every rule without producing output."""
        decision = self._bottling.evaluate(entry)
        if decision.skip:
            return decision

        tap = self._failed_taps.blocking_tap(entry)
        if tap is not None:
            logger.debug("%s is under failed tap %s", entry.name, tap)
            return SkipDecision(skip=True, source=SkipSource.FAILED_TAP)

        skip_list = self._config.skip_list_for(entry.entry_type)
        if not skip_list:
            return NOT_SKIPPED

        if skip_list.isdisjoint(candidate_ids(entry)):
            return NOT_SKIPPED

        return SkipDecision(skip=True, source=SkipSource.CONFIGURED)

    def evaluate(self, entry: Entry, *, silent: bool = False) -> SkipDecision:
        """Decide on ``entry`` and warn about it if it is skipped.

        Unless ``silent``, a warning names each skipped entry. Entries
        skipped because their tap failed produce no warning; the tap
        failure itself has already been reported by the installer.
        """
        decision = self.decide(entry)
        logger.debug(
            "%s %s: skip=%s source=%s",
            entry.entry_type.value,
            entry.name,
            decision.skip,
            decision.source.value if decision.source else None,
        )
        if not decision.skip or silent:
            return decision

        if decision.source is SkipSource.PLATFORM:
            self._feedback.warning(f"Skipping {entry.name} (no bottle for {decision.reason})")
        elif decision.source is SkipSource.CONFIGURED:
            self._feedback.warning(f"Skipping {entry.name}")
        return decision

    def should_skip(self, entry: Entry, *, silent: bool = False) -> bool:
        """Return True if ``entry`` should not be installed."""
        return self.evaluate(entry, silent=silent).skip
