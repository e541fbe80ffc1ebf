"""Tests for the fake host and formula metadata store."""

from pathlib import Path

from bundlegate.core.formulae.fake import FakeFormulaMetadataStore
from bundlegate.core.host.fake import FakeHost
from tests.test_utils.formulae import core_formula


def test_fake_host_defaults_to_intel_macos() -> None:
    host = FakeHost()

    assert not host.is_arm()
    assert not host.is_linux()
    assert host.homebrew_prefix() == Path("/usr/local")
    assert host.is_default_prefix()


def test_fake_host_default_prefix_follows_platform() -> None:
    assert FakeHost(arm=True).homebrew_prefix() == Path("/opt/homebrew")
    assert FakeHost(linux=True).homebrew_prefix() == Path("/home/linuxbrew/.linuxbrew")
    assert FakeHost(linux=True, arm=True).homebrew_prefix() == Path("/home/linuxbrew/.linuxbrew")


def test_fake_host_custom_prefix() -> None:
    host = FakeHost(linux=True, prefix=Path("/opt/brew"))

    assert host.homebrew_prefix() == Path("/opt/brew")
    assert not host.is_default_prefix()


def test_fake_formula_store_returns_configured_formulae() -> None:
    zlib = core_formula("zlib", bottled=False)
    store = FakeFormulaMetadataStore(formulae={"zlib": zlib})

    assert store.formula_by_full_name("zlib") is zlib
    assert store.formula_by_full_name("wget") is None
    assert store.lookups == ["zlib", "wget"]


def test_fake_host_macos_version() -> None:
    assert FakeHost().macos_version() is None
    assert FakeHost(arm=True, macos_version=(14, 5)).macos_version() == (14, 5)
    assert FakeHost(linux=True, macos_version=(14, 5)).macos_version() is None
