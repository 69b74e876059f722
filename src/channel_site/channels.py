"""Fetch the per-channel release manifests and reduce them for the site."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable

import requests
from pydantic import ValidationError

from channel_site.errors import ParseError
from channel_site.models.channel import ChannelManifest
from channel_site.models.site_config import ChannelSummary
from channel_site.remote import fetch_text
from channel_site.settings import CHANNEL_URL_PREFIX, CHANNEL_URL_SUFFIX, CHANNELS

logger = logging.getLogger(__name__)


def channel_url(name: str, prefix: str = CHANNEL_URL_PREFIX, suffix: str = CHANNEL_URL_SUFFIX) -> str:
    return f"{prefix}{name}{suffix}"


def parse_channel_manifest(text: str, source: str = "<manifest>") -> ChannelManifest:
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ParseError(source, str(exc)) from exc
    try:
        return ChannelManifest.model_validate(raw)
    except ValidationError as exc:
        raise ParseError(source, str(exc)) from exc


def summarize_manifest(manifest: ChannelManifest) -> ChannelSummary:
    """Keep the bare version number and the targets that were actually built."""
    rust = manifest.pkg.rust
    # "1.75.0 (82e1608df 2023-12-21)" -> "1.75.0"
    vers = rust.version.split(" ", 1)[0]
    platforms = [target for target, info in rust.target.items() if info.available]
    return ChannelSummary(vers=vers, platforms=platforms)


def fetch_channel(
    session: requests.Session,
    name: str,
    url_prefix: str = CHANNEL_URL_PREFIX,
    timeout: float | None = None,
) -> ChannelSummary:
    url = channel_url(name, url_prefix)
    manifest = parse_channel_manifest(fetch_text(session, url, timeout=timeout), source=url)
    summary = summarize_manifest(manifest)
    rust = manifest.pkg.rust
    logger.info(
        "Found %d targets for %s channel (v%s, %d listed)",
        len(summary.platforms),
        name,
        rust.version,
        len(rust.target),
    )
    return summary


def fetch_channels(
    session: requests.Session,
    url_prefix: str = CHANNEL_URL_PREFIX,
    channels: Iterable[str] = CHANNELS,
    timeout: float | None = None,
) -> dict[str, ChannelSummary]:
    """Fetch every channel in order. The first failure aborts the whole run."""
    summaries: dict[str, ChannelSummary] = {}
    for name in channels:
        summaries[name] = fetch_channel(session, name, url_prefix, timeout=timeout)
    return summaries
