"""Fake Host implementation for testing."""

from pathlib import Path

from bundlegate.core.host.abc import Host


class FakeHost(Host):
    """In-memory fake with platform facts fixed at construction.

    This class has NO public setup methods. All state is provided via constructor.

    Examples:
        # Apple Silicon Mac with a default install
        >>> host = FakeHost(arm=True)
        >>> host.is_default_prefix()
        True

        # Linux with Homebrew relocated to a custom prefix
        >>> host = FakeHost(linux=True, prefix=Path("/opt/brew"))
        >>> host.is_default_prefix()
        False
    """

    def __init__(
        self,
        *,
        arm: bool = False,
        linux: bool = False,
        prefix: Path | None = None,
        macos_version: tuple[int, ...] | None = None,
    ) -> None:
        """Create FakeHost.

        Args:
            arm: Whether to report an ARM CPU
            linux: Whether to report Linux
            prefix: Homebrew prefix to report. None means the platform default.
            macos_version: macOS release to report. Ignored when linux is set.
        """
        self._arm = arm
        self._linux = linux
        self._prefix = prefix
        self._macos_version = macos_version

    def is_arm(self) -> bool:
        return self._arm

    def is_linux(self) -> bool:
        return self._linux

    def macos_version(self) -> tuple[int, ...] | None:
        if self._linux:
            return None
        return self._macos_version

    def homebrew_prefix(self) -> Path:
        if self._prefix is None:
            return self.default_prefix()
        return self._prefix
