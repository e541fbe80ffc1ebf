"""Tests for context creation."""

from pathlib import Path

import pytest

from bundlegate.core.context import BundleGateContext, create_context
from bundlegate.core.entry import EntryType
from bundlegate.core.formulae.real import RealFormulaMetadataStore
from bundlegate.core.global_config import GlobalConfig, InMemoryConfigStore
from bundlegate.core.host.real import RealHost
from bundlegate.core.user_feedback import InteractiveFeedback, SuppressedFeedback


def test_create_context_uses_real_integrations() -> None:
    ctx = create_context(environ={}, config_store=InMemoryConfigStore())

    assert isinstance(ctx.host, RealHost)
    assert isinstance(ctx.formulae, RealFormulaMetadataStore)
    assert isinstance(ctx.feedback, InteractiveFeedback)
    assert ctx.global_config == GlobalConfig()


def test_create_context_quiet_suppresses_feedback() -> None:
    ctx = create_context(quiet=True, environ={}, config_store=InMemoryConfigStore())

    assert isinstance(ctx.feedback, SuppressedFeedback)


def test_create_context_reads_skip_lists_with_configured_prefix() -> None:
    store = InMemoryConfigStore(GlobalConfig(env_prefix="MYBUNDLE"))
    environ = {
        "MYBUNDLE_CASK_SKIP": "firefox",
        "HOMEBREW_BUNDLE_CASK_SKIP": "chrome",
    }

    ctx = create_context(environ=environ, config_store=store)

    assert ctx.skip_config.skip_list_for(EntryType.CASK) == frozenset({"firefox"})


def test_create_context_applies_homebrew_prefix_override() -> None:
    store = InMemoryConfigStore(GlobalConfig(homebrew_prefix=Path("/opt/custom")))

    ctx = create_context(environ={"HOMEBREW_PREFIX": "/usr/local"}, config_store=store)

    assert ctx.host.homebrew_prefix() == Path("/opt/custom")


def test_create_context_propagates_malformed_config(tmp_path: Path) -> None:
    from bundlegate.core.global_config import FilesystemConfigStore

    config_path = tmp_path / "config.toml"
    config_path.write_text("debug = 3\n", encoding="utf-8")

    with pytest.raises(ValueError, match="debug"):
        create_context(environ={}, config_store=FilesystemConfigStore(config_path))


def test_for_test_builds_skip_config_from_environ() -> None:
    ctx = BundleGateContext.for_test(environ={"HOMEBREW_BUNDLE_BREW_SKIP": "wget"})

    assert ctx.skip_config.skip_list_for(EntryType.BREW) == frozenset({"wget"})
    assert ctx.config_store.load() == ctx.global_config
