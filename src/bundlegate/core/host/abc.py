"""Host platform facts abstraction for testing."""

from abc import ABC, abstractmethod
from pathlib import Path

LINUX_DEFAULT_PREFIX = Path("/home/linuxbrew/.linuxbrew")
MACOS_ARM_DEFAULT_PREFIX = Path("/opt/homebrew")
MACOS_INTEL_DEFAULT_PREFIX = Path("/usr/local")


class Host(ABC):
    """Abstract host platform facts for dependency injection."""

    @abstractmethod
    def is_arm(self) -> bool:
        """Check if the CPU is an ARM architecture."""
        ...

    @abstractmethod
    def is_linux(self) -> bool:
        """Check if the operating system is Linux."""
        ...

    @abstractmethod
    def homebrew_prefix(self) -> Path:
        """Get the prefix Homebrew is installed under."""
        ...

    @abstractmethod
    def macos_version(self) -> tuple[int, ...] | None:
        """Get the running macOS release, e.g. (14, 5), or None off macOS or if unknown."""
        ...

    def default_prefix(self) -> Path:
        """Get the prefix Homebrew installs to by default on this platform."""
        if self.is_linux():
            return LINUX_DEFAULT_PREFIX
        if self.is_arm():
            return MACOS_ARM_DEFAULT_PREFIX
        return MACOS_INTEL_DEFAULT_PREFIX

    def is_default_prefix(self) -> bool:
        """Check if Homebrew lives under its default prefix.

        Installs under any other prefix cannot use bottles built for the
        default one, so their owners are expected to build from source.
        """
        return self.homebrew_prefix() == self.default_prefix()
