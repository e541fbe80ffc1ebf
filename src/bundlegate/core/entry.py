"""Bundle entry types and skip decisions.

Entries are produced by the manifest parser and only read here. Each entry
type is its own frozen dataclass carrying just the fields that type uses, so
an App Store entry has an ``id`` and a formula has a ``full_name``, but never
both.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class EntryType(Enum):
    """Closed set of bundle entry categories."""

    BREW = "brew"
    CASK = "cask"
    MAS = "mas"
    TAP = "tap"
    WHALEBREW = "whalebrew"


@dataclass(frozen=True)
class Entry:
    """A single dependency declaration from a bundle manifest."""

    entry_type: ClassVar[EntryType]

    name: str

    @property
    def full_name(self) -> str | None:
        """Tap-qualified name, if this entry type records one."""
        return None

    @property
    def alternate_id(self) -> int | str | None:
        """Non-name identifier, if this entry type records one."""
        return None

    @property
    def is_namespaced(self) -> bool:
        return "/" in self.name


@dataclass(frozen=True)
class BrewEntry(Entry):
    """Formula entry (`brew "wget"`)."""

    entry_type: ClassVar[EntryType] = EntryType.BREW

    tap_full_name: str | None = None

    @property
    def full_name(self) -> str | None:
        return self.tap_full_name


@dataclass(frozen=True)
class CaskEntry(Entry):
    """Cask entry (`cask "firefox"`)."""

    entry_type: ClassVar[EntryType] = EntryType.CASK

    tap_full_name: str | None = None

    @property
    def full_name(self) -> str | None:
        return self.tap_full_name


@dataclass(frozen=True)
class MasEntry(Entry):
    """Mac App Store entry (`mas "Xcode", id: 497799835`).

    App names contain spaces and the `mas` output format changes between
    releases, so the numeric id is the stable identifier.
    """

    entry_type: ClassVar[EntryType] = EntryType.MAS

    id: int | str | None = None

    @property
    def alternate_id(self) -> int | str | None:
        return self.id


@dataclass(frozen=True)
class TapEntry(Entry):
    """Tap entry (`tap "homebrew/cask-fonts"`)."""

    entry_type: ClassVar[EntryType] = EntryType.TAP


@dataclass(frozen=True)
class WhalebrewEntry(Entry):
    """Whalebrew image entry (`whalebrew "whalebrew/wget"`)."""

    entry_type: ClassVar[EntryType] = EntryType.WHALEBREW


ENTRY_CLASSES: dict[EntryType, type[Entry]] = {
    EntryType.BREW: BrewEntry,
    EntryType.CASK: CaskEntry,
    EntryType.MAS: MasEntry,
    EntryType.TAP: TapEntry,
    EntryType.WHALEBREW: WhalebrewEntry,
}


def build_entry(
    entry_type: EntryType,
    name: str,
    *,
    full_name: str | None = None,
    entry_id: int | str | None = None,
) -> Entry:
    """Build the entry variant for ``entry_type`` from loose inputs.

    Raises:
        ValueError: If a field is given that the entry type does not carry
    """
    if full_name is not None and entry_type not in (EntryType.BREW, EntryType.CASK):
        raise ValueError(f"{entry_type.value} entries do not have a full name")
    if entry_id is not None and entry_type is not EntryType.MAS:
        raise ValueError(f"{entry_type.value} entries do not have an id")

    if entry_type is EntryType.BREW:
        return BrewEntry(name=name, tap_full_name=full_name)
    if entry_type is EntryType.CASK:
        return CaskEntry(name=name, tap_full_name=full_name)
    if entry_type is EntryType.MAS:
        return MasEntry(name=name, id=entry_id)
    return ENTRY_CLASSES[entry_type](name=name)


class SkipSource(Enum):
    """Rule that produced a skip decision."""

    PLATFORM = "platform"
    FAILED_TAP = "failed_tap"
    CONFIGURED = "configured"


@dataclass(frozen=True)
class SkipDecision:
    """Outcome of evaluating one entry."""

    skip: bool
    reason: str | None = None
    source: SkipSource | None = None


NOT_SKIPPED = SkipDecision(skip=False)
