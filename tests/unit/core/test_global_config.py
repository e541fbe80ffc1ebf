"""Tests for global config loading and saving."""

from pathlib import Path

import pytest

from bundlegate.core.global_config import (
    FilesystemConfigStore,
    GlobalConfig,
    InMemoryConfigStore,
)


def test_missing_file_loads_defaults(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "config.toml")

    assert not store.exists()
    assert store.load() == GlobalConfig()


def test_load_reads_all_fields(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        'env_prefix = "MYBUNDLE"\nhomebrew_prefix = "/opt/brew"\ndebug = true\n',
        encoding="utf-8",
    )

    config = FilesystemConfigStore(config_path).load()

    assert config == GlobalConfig(
        env_prefix="MYBUNDLE",
        homebrew_prefix=Path("/opt/brew"),
        debug=True,
    )


def test_save_then_load(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "nested" / "config.toml")
    config = GlobalConfig(env_prefix="MYBUNDLE", homebrew_prefix=Path("/opt/brew"))

    store.save(config)

    assert store.exists()
    assert store.load() == config
    assert "# Global bundlegate configuration" in store.path().read_text(encoding="utf-8")


def test_save_omits_unset_homebrew_prefix(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "config.toml")

    store.save(GlobalConfig())

    assert "homebrew_prefix" not in store.path().read_text(encoding="utf-8")
    assert store.load().homebrew_prefix is None


def test_invalid_toml_raises_value_error(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("env_prefix = ", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        FilesystemConfigStore(config_path).load()


@pytest.mark.parametrize(
    ("content", "field"),
    [
        ("env_prefix = 1\n", "env_prefix"),
        ('env_prefix = ""\n', "env_prefix"),
        ("homebrew_prefix = false\n", "homebrew_prefix"),
        ('debug = "yes"\n', "debug"),
    ],
)
def test_wrong_value_types_raise_value_error(tmp_path: Path, content: str, field: str) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=field):
        FilesystemConfigStore(config_path).load()


def test_default_path_is_under_home() -> None:
    assert FilesystemConfigStore().path() == Path.home() / ".bundlegate" / "config.toml"


def test_in_memory_store() -> None:
    store = InMemoryConfigStore()

    assert not store.exists()
    assert store.load() == GlobalConfig()

    store.save(GlobalConfig(debug=True))

    assert store.exists()
    assert store.load().debug is True
