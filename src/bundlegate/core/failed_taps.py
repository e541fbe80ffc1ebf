"""Registry of taps whose installation failed during this run."""

import logging
import threading

from bundlegate.core.entry import Entry

logger = logging.getLogger(__name__)


class FailedTapRegistry:
    """Append-only set of failed tap names, in registration order.

    Once a tap fails, every entry namespaced under it (``<tap>/<name>``) is
    blocked, whether the manifest refers to it by its qualified name or by
    its short name with a recorded full name.
    """

    def __init__(self, taps: list[str] | None = None) -> None:
        self._taps: list[str] = []
        self._lock = threading.Lock()
        for tap in taps or []:
            self.register_failure(tap)

    @property
    def failed_taps(self) -> tuple[str, ...]:
        return tuple(self._taps)

    def register_failure(self, tap: str) -> None:
        """Record that ``tap`` failed to install. Registering twice is a no-op."""
        with self._lock:
            if tap in self._taps:
                return
            self._taps.append(tap)
        logger.debug("Registered failed tap: %s", tap)

    def blocking_tap(self, entry: Entry) -> str | None:
        """Return the first failed tap that ``entry`` is namespaced under, if any."""
        full_name = entry.full_name
        for tap in self.failed_taps:
            prefix = f"{tap}/"
            if entry.name.startswith(prefix):
                return tap
            if full_name is not None and full_name.startswith(prefix):
                return tap
        return None

    def is_blocked(self, entry: Entry) -> bool:
        return self.blocking_tap(entry) is not None
