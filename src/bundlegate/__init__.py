"""Skip decisions for bundle manifest entries."""

from bundlegate.core.entry import (
    BrewEntry,
    CaskEntry,
    Entry,
    EntryType,
    MasEntry,
    SkipDecision,
    SkipSource,
    TapEntry,
    WhalebrewEntry,
    build_entry,
)
from bundlegate.core.failed_taps import FailedTapRegistry
from bundlegate.core.skip_config import SkipConfig
from bundlegate.core.skipper import Skipper

__version__ = "0.1.0"

__all__ = [
    # Entries
    "BrewEntry",
    "CaskEntry",
    "Entry",
    "EntryType",
    "MasEntry",
    "TapEntry",
    "WhalebrewEntry",
    "build_entry",
    # Decisions
    "SkipDecision",
    "SkipSource",
    "Skipper",
    # Caches
    "FailedTapRegistry",
    "SkipConfig",
]
