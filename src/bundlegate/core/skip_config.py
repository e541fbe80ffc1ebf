"""Per-type skip lists read from the environment.

Each entry type has one variable following ``<PREFIX>_<TYPE>_SKIP``, holding
a whitespace-separated list of names or ids:

    HOMEBREW_BUNDLE_BREW_SKIP="wget curl"
    HOMEBREW_BUNDLE_MAS_SKIP="497799835"

A missing variable means the type has no skip list. Lists are read once, when
the SkipConfig is built, and never re-read.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from bundlegate.core.entry import EntryType

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "HOMEBREW_BUNDLE"


def env_var_name(entry_type: EntryType, prefix: str = DEFAULT_ENV_PREFIX) -> str:
    """Return the environment variable holding the skip list for ``entry_type``."""
    return f"{prefix}_{entry_type.value.upper()}_SKIP"


@dataclass(frozen=True)
class SkipConfig:
    """Immutable mapping of entry type to its configured skip list."""

    prefix: str = DEFAULT_ENV_PREFIX
    skip_lists: Mapping[EntryType, frozenset[str]] = field(default_factory=dict)

    @staticmethod
    def from_environ(
        environ: Mapping[str, str], prefix: str = DEFAULT_ENV_PREFIX
    ) -> "SkipConfig":
        """Build skip lists for every entry type from ``environ``."""
        skip_lists: dict[EntryType, frozenset[str]] = {}
        for entry_type in EntryType:
            key = env_var_name(entry_type, prefix)
            value = environ.get(key)
            if value is None:
                continue
            skip_lists[entry_type] = frozenset(value.split())
            logger.debug("%s=%r -> %d token(s)", key, value, len(skip_lists[entry_type]))
        return SkipConfig(prefix=prefix, skip_lists=skip_lists)

    def skip_list_for(self, entry_type: EntryType) -> frozenset[str] | None:
        """Return the skip list for ``entry_type``, or None if none is configured."""
        return self.skip_lists.get(entry_type)

    def configured_types(self) -> list[EntryType]:
        return [entry_type for entry_type in EntryType if entry_type in self.skip_lists]
