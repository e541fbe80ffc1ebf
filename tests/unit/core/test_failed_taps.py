"""Tests for FailedTapRegistry."""

from bundlegate.core.entry import BrewEntry, CaskEntry, MasEntry
from bundlegate.core.failed_taps import FailedTapRegistry


def test_empty_registry_blocks_nothing() -> None:
    registry = FailedTapRegistry()

    assert registry.failed_taps == ()
    assert not registry.is_blocked(BrewEntry(name="foo/bar/baz"))


def test_blocks_entries_namespaced_under_failed_tap() -> None:
    registry = FailedTapRegistry()
    registry.register_failure("foo")

    assert registry.is_blocked(BrewEntry(name="foo/bar"))
    assert not registry.is_blocked(BrewEntry(name="foobar"))
    assert not registry.is_blocked(BrewEntry(name="bar/foo"))


def test_blocks_short_name_through_full_name() -> None:
    registry = FailedTapRegistry()
    registry.register_failure("user/tools")

    entry = CaskEntry(name="widget", tap_full_name="user/tools/widget")

    assert registry.is_blocked(entry)
    assert registry.blocking_tap(entry) == "user/tools"


def test_full_name_must_also_match_with_separator() -> None:
    registry = FailedTapRegistry()
    registry.register_failure("user/tools")

    entry = BrewEntry(name="widget", tap_full_name="user/toolsmith/widget")

    assert not registry.is_blocked(entry)


def test_entries_without_full_name_match_on_name_only() -> None:
    registry = FailedTapRegistry()
    registry.register_failure("user/apps")

    assert not registry.is_blocked(MasEntry(name="Some App", id=12345))


def test_register_failure_is_idempotent() -> None:
    once = FailedTapRegistry()
    once.register_failure("foo")

    twice = FailedTapRegistry()
    twice.register_failure("foo")
    twice.register_failure("foo")

    assert twice.failed_taps == once.failed_taps == ("foo",)
    for name in ["foo/bar", "foobar", "bar/foo"]:
        entry = BrewEntry(name=name)
        assert twice.is_blocked(entry) == once.is_blocked(entry)


def test_registration_order_is_preserved() -> None:
    registry = FailedTapRegistry(["b/tap", "a/tap"])
    registry.register_failure("c/tap")
    registry.register_failure("a/tap")

    assert registry.failed_taps == ("b/tap", "a/tap", "c/tap")


def test_blocking_tap_returns_first_registered_match() -> None:
    registry = FailedTapRegistry(["user", "user/tools"])

    assert registry.blocking_tap(BrewEntry(name="user/tools/widget")) == "user"
