"""Real host facts from the running interpreter and the Homebrew install."""

import logging
import os
import platform
import subprocess
import sys
from collections.abc import Mapping
from pathlib import Path

from bundlegate.core.host.abc import Host

logger = logging.getLogger(__name__)

ARM_MACHINES = frozenset({"arm64", "aarch64"})


class RealHost(Host):
    """Production implementation using platform, sys and the brew CLI.

    The Homebrew prefix is resolved once, in order: the explicit override,
    ``HOMEBREW_PREFIX`` from the environment, ``brew --prefix``, and finally
    the platform default.
    """

    def __init__(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        prefix_override: Path | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._prefix_override = prefix_override
        self._resolved_prefix: Path | None = None

    def is_arm(self) -> bool:
        machine = platform.machine().lower()
        return machine in ARM_MACHINES or machine.startswith("arm")

    def is_linux(self) -> bool:
        return sys.platform.startswith("linux")

    def macos_version(self) -> tuple[int, ...] | None:
        if sys.platform != "darwin":
            return None
        release = platform.mac_ver()[0]
        try:
            return tuple(int(part) for part in release.split("."))
        except ValueError:
            logger.debug("Unrecognized macOS release %r", release)
            return None

    def homebrew_prefix(self) -> Path:
        if self._resolved_prefix is None:
            self._resolved_prefix = self._resolve_prefix()
            logger.debug("Homebrew prefix: %s", self._resolved_prefix)
        return self._resolved_prefix

    def _resolve_prefix(self) -> Path:
        if self._prefix_override is not None:
            return self._prefix_override

        env_prefix = self._environ.get("HOMEBREW_PREFIX")
        if env_prefix:
            return Path(env_prefix)

        try:
            result = subprocess.run(
                ["brew", "--prefix"],
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
                timeout=10,
            )
        except (OSError, subprocess.TimeoutExpired):
            return self.default_prefix()

        stdout = result.stdout.strip()
        if result.returncode != 0 or not stdout:
            return self.default_prefix()
        return Path(stdout)
