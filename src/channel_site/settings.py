"""Built-in sources and paths, plus the optional YAML settings file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from channel_site.errors import ParseError

logger = logging.getLogger(__name__)

RUSTUP_TARGETS_URL = (
    "https://raw.githubusercontent.com/rust-lang/rustup.rs/stable/ci/cloudfront-invalidation.txt"
)
CHANNEL_URL_PREFIX = "https://static.rust-lang.org/dist/channel-rust-"
CHANNEL_URL_SUFFIX = ".toml"

# Order here is the key order of `channels` in the emitted config.
CHANNELS: tuple[str, ...] = ("stable", "beta", "nightly")

# Paths Jekyll must not walk when building the site.
EXCLUDE: tuple[str, ...] = ("target", "vendor")

DEFAULT_TIERS_FILE = "tiers.yaml"
DEFAULT_OUTPUT_FILE = "_config.yml"


class SiteSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    tiers_file: str = DEFAULT_TIERS_FILE
    output_file: str = DEFAULT_OUTPUT_FILE
    rustup_targets_url: str = RUSTUP_TARGETS_URL
    channel_url_prefix: str = CHANNEL_URL_PREFIX
    http_timeout: float | None = None  # None blocks until the server answers


def load_settings(path: str | Path | None) -> SiteSettings:
    """Load *path* as a settings YAML file, or return the defaults when unset."""
    if path is None:
        return SiteSettings()
    with open(path, "rb") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ParseError(str(path), str(exc)) from exc
    if not isinstance(raw, dict):
        raise ParseError(str(path), "expected YAML mapping")
    try:
        settings = SiteSettings.model_validate(raw)
    except ValidationError as exc:
        raise ParseError(str(path), str(exc)) from exc
    logger.debug("Loaded settings from %s", path)
    return settings


def apply_overrides(settings: SiteSettings, **overrides: str | float | None) -> SiteSettings:
    """Return a copy of *settings* with every non-None override applied."""
    update = {k: v for k, v in overrides.items() if v is not None}
    if not update:
        return settings
    return settings.model_copy(update=update)
