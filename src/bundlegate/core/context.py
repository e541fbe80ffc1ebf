"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from bundlegate.core.formulae.abc import FormulaMetadataStore
from bundlegate.core.formulae.real import RealFormulaMetadataStore
from bundlegate.core.global_config import ConfigStore, FilesystemConfigStore, GlobalConfig
from bundlegate.core.host.abc import Host
from bundlegate.core.host.real import RealHost
from bundlegate.core.skip_config import SkipConfig
from bundlegate.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback


@dataclass(frozen=True)
class BundleGateContext:
    """Immutable context holding all dependencies for skip decisions.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime. The skip config
    is read from the environment once, when the context is created.
    """

    host: Host
    formulae: FormulaMetadataStore
    feedback: UserFeedback
    config_store: ConfigStore
    global_config: GlobalConfig
    skip_config: SkipConfig

    @staticmethod
    def for_test(
        host: Host | None = None,
        formulae: FormulaMetadataStore | None = None,
        feedback: UserFeedback | None = None,
        config_store: ConfigStore | None = None,
        global_config: GlobalConfig | None = None,
        skip_config: SkipConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "BundleGateContext":
        """Create test context with optional pre-configured integration classes.

        Args:
            host: Optional Host. If None, creates FakeHost for Intel macOS.
            formulae: Optional FormulaMetadataStore. If None, creates empty fake.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            config_store: Optional ConfigStore. If None, creates InMemoryConfigStore
                holding global_config.
            global_config: Optional GlobalConfig. If None, uses defaults.
            skip_config: Optional SkipConfig. If None, built from environ.
            environ: Environment to build skip_config from (default: empty).

        Returns:
            BundleGateContext configured with provided values and test defaults

        Example:
            >>> host = FakeHost(arm=True)
            >>> ctx = BundleGateContext.for_test(
            ...     host=host,
            ...     environ={"HOMEBREW_BUNDLE_BREW_SKIP": "wget"},
            ... )
        """
        from tests.fakes.user_feedback import FakeUserFeedback

        from bundlegate.core.formulae.fake import FakeFormulaMetadataStore
        from bundlegate.core.global_config import InMemoryConfigStore
        from bundlegate.core.host.fake import FakeHost

        if host is None:
            host = FakeHost()

        if formulae is None:
            formulae = FakeFormulaMetadataStore()

        if feedback is None:
            feedback = FakeUserFeedback()

        if global_config is None:
            global_config = GlobalConfig()

        if config_store is None:
            config_store = InMemoryConfigStore(config=global_config)

        if skip_config is None:
            skip_config = SkipConfig.from_environ(environ or {}, global_config.env_prefix)

        return BundleGateContext(
            host=host,
            formulae=formulae,
            feedback=feedback,
            config_store=config_store,
            global_config=global_config,
            skip_config=skip_config,
        )


def create_context(
    *,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
    config_store: ConfigStore | None = None,
) -> BundleGateContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        quiet: If True, use SuppressedFeedback so only errors are shown
        environ: Environment to read skip lists and HOMEBREW_PREFIX from
                 (default: os.environ)
        config_store: Global config store (default: ~/.bundlegate/config.toml)

    Returns:
        BundleGateContext with real implementations

    Raises:
        ValueError: If the global config file is malformed
    """
    if environ is None:
        environ = os.environ

    # 1. Load global config (defaults when the file does not exist)
    if config_store is None:
        config_store = FilesystemConfigStore()
    global_config = config_store.load()

    # 2. Create integration classes
    host: Host = RealHost(environ=environ, prefix_override=global_config.homebrew_prefix)
    formulae: FormulaMetadataStore = RealFormulaMetadataStore(host)

    # 3. Read skip lists once for the whole run
    skip_config = SkipConfig.from_environ(environ, global_config.env_prefix)

    feedback: UserFeedback
    if quiet:
        feedback = SuppressedFeedback()
    else:
        feedback = InteractiveFeedback()

    return BundleGateContext(
        host=host,
        formulae=formulae,
        feedback=feedback,
        config_store=config_store,
        global_config=global_config,
        skip_config=skip_config,
    )
