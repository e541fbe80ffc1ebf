"""Pydantic models for JSON output schemas.

These models define the validated JSON documents emitted by commands that
support --json.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class EntryDecisionInfo(BaseModel):
    """Skip decision for one entry in `bundlegate check --json`.

    Attributes:
        type: Entry type ("brew", "cask", ...)
        name: Entry name as given
        skip: Whether the entry would be skipped
        source: Rule that caused the skip (None when not skipped)
        reason: Platform reason for bottling skips (None otherwise)
        failed_tap: Failed tap the entry is namespaced under, if any
    """

    model_config = ConfigDict(strict=True)

    type: str
    name: str
    skip: bool
    source: Literal["platform", "failed_tap", "configured"] | None = None
    reason: str | None = None
    failed_tap: str | None = None


class CheckCommandResponse(BaseModel):
    """JSON response schema for the `bundlegate check` command."""

    model_config = ConfigDict(strict=True)

    entries: list[EntryDecisionInfo]
    failed_taps: list[str]


class SkipListInfo(BaseModel):
    """One configured skip list for `bundlegate config show --json`.

    Attributes:
        type: Entry type the list applies to
        env_var: Environment variable the list was read from
        configured: Whether the variable is set at all
        ids: Tokens in the list, sorted
    """

    model_config = ConfigDict(strict=True)

    type: str
    env_var: str
    configured: bool
    ids: list[str]


class ConfigShowResponse(BaseModel):
    """JSON response schema for the `bundlegate config show` command."""

    model_config = ConfigDict(strict=True)

    config_path: str
    config_exists: bool
    env_prefix: str
    homebrew_prefix: str
    default_prefix: bool
    platform_rule: str | None
    skip_lists: list[SkipListInfo]
