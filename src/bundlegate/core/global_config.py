"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.bundlegate/config.toml.
Loaded once at the CLI entry point; a missing file means defaults.

Example config:
  env_prefix = "HOMEBREW_BUNDLE"
  homebrew_prefix = "/opt/homebrew"
  debug = false
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from bundlegate.core.skip_config import DEFAULT_ENV_PREFIX


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Attributes:
        env_prefix: Prefix of the ``<PREFIX>_<TYPE>_SKIP`` environment variables
        homebrew_prefix: Homebrew prefix to assume instead of detecting it
        debug: Whether to enable debug logging
    """

    env_prefix: str = DEFAULT_ENV_PREFIX
    homebrew_prefix: Path | None = None
    debug: bool = False


class ConfigStore(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config.

        Returns:
            GlobalConfig instance with loaded values, or defaults if none exists

        Raises:
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Save global config.

        Args:
            config: GlobalConfig instance to save
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file.

        Returns:
            Path to config file (for error messages and debugging)
        """
        ...


def parse_global_config(data: dict[str, object], source: Path) -> GlobalConfig:
    """Build a GlobalConfig from parsed TOML data.

    Raises:
        ValueError: If a value has the wrong type
    """
    env_prefix = data.get("env_prefix", DEFAULT_ENV_PREFIX)
    if not isinstance(env_prefix, str) or not env_prefix:
        raise ValueError(f"'env_prefix' must be a non-empty string in {source}")

    homebrew_prefix = data.get("homebrew_prefix")
    if homebrew_prefix is not None and not isinstance(homebrew_prefix, str):
        raise ValueError(f"'homebrew_prefix' must be a string in {source}")

    debug = data.get("debug", False)
    if not isinstance(debug, bool):
        raise ValueError(f"'debug' must be true or false in {source}")

    return GlobalConfig(
        env_prefix=env_prefix,
        homebrew_prefix=Path(homebrew_prefix).expanduser() if homebrew_prefix else None,
        debug=debug,
    )


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.bundlegate/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize the store.

        Args:
            config_path: Location of the config file. None means ~/.bundlegate/config.toml.
        """
        self._config_path = config_path

    def exists(self) -> bool:
        """Check if global config file exists."""
        return self.path().exists()

    def load(self) -> GlobalConfig:
        """Load global config from disk, or defaults if the file is absent.

        Raises:
            ValueError: If the file is not valid TOML or has invalid values
        """
        config_path = self.path()
        if not config_path.exists():
            return GlobalConfig()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e
        return parse_global_config(data, config_path)

    def save(self, config: GlobalConfig) -> None:
        """Save global config to disk, preserving formatting.

        Raises:
            PermissionError: If directory or file cannot be written
        """
        config_path = self.path()
        parent = config_path.parent

        if parent.exists() and not os.access(parent, os.W_OK):
            raise PermissionError(
                f"Cannot write to directory: {parent}\n"
                f"The directory exists but is not writable."
            )
        parent.mkdir(parents=True, exist_ok=True)

        doc = tomlkit.document()
        doc.add(tomlkit.comment("Global bundlegate configuration"))
        doc["env_prefix"] = config.env_prefix
        if config.homebrew_prefix is not None:
            doc["homebrew_prefix"] = str(config.homebrew_prefix)
        doc["debug"] = config.debug

        config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        """Get the path to the global config file."""
        if self._config_path is not None:
            return self._config_path
        return Path.home() / ".bundlegate" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        """Check if global config exists in memory."""
        return self._config is not None

    def load(self) -> GlobalConfig:
        """Load global config from memory, or defaults if none was saved."""
        if self._config is None:
            return GlobalConfig()
        return self._config

    def save(self, config: GlobalConfig) -> None:
        """Save global config to memory."""
        self._config = config

    def path(self) -> Path:
        """Get fake path for error messages."""
        return Path("/fake/bundlegate/config.toml")
