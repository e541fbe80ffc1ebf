"""Real formula metadata store using the brew CLI."""

import logging
import subprocess

from pydantic import ValidationError

from bundlegate.core.formulae.abc import FormulaMetadataStore
from bundlegate.core.formulae.parsing import parse_brew_info
from bundlegate.core.formulae.types import FormulaInfo
from bundlegate.core.host.abc import Host

logger = logging.getLogger(__name__)


def _run_subprocess_with_timeout(
    cmd: list[str],
    timeout: int = 60,
) -> subprocess.CompletedProcess[str] | None:
    """Run subprocess with timeout, returning None if brew cannot be run or times out.

    Undecodable output is replaced rather than raised, so it fails validation
    downstream like any other malformed document.
    """
    try:
        return subprocess.run(
            cmd,
            timeout=timeout,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except (subprocess.TimeoutExpired, OSError):
        return None


class RealFormulaMetadataStore(FormulaMetadataStore):
    """Real implementation using `brew info --json=v2`.

    Results, including failed lookups, are memoized for the life of the
    store, so each formula costs at most one brew invocation.
    """

    def __init__(self, host: Host) -> None:
        """Initialize RealFormulaMetadataStore.

        Args:
            host: Host facts used to decide which bottle tags apply
        """
        self._host = host
        self._cache: dict[str, FormulaInfo | None] = {}

    def formula_by_full_name(self, name: str) -> FormulaInfo | None:
        if name not in self._cache:
            self._cache[name] = self._lookup(name)
        return self._cache[name]

    def _lookup(self, name: str) -> FormulaInfo | None:
        result = _run_subprocess_with_timeout(["brew", "info", "--json=v2", "--formula", name])
        if result is None or result.returncode != 0:
            logger.debug("brew info failed for %s", name)
            return None

        try:
            return parse_brew_info(result.stdout, self._host)
        except ValidationError as e:
            logger.debug("Unparseable brew info output for %s: %s", name, e)
            return None
