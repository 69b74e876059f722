"""Load -> scan -> fetch channels -> assemble -> emit."""

from __future__ import annotations

import logging

import requests

from channel_site.channels import fetch_channels
from channel_site.emitter import write_config
from channel_site.models.site_config import SiteConfig, build_site_config
from channel_site.remote import new_session
from channel_site.rustup import scan_rustup_targets
from channel_site.settings import SiteSettings
from channel_site.tiers import load_tiers

logger = logging.getLogger(__name__)


def build_config(settings: SiteSettings, session: requests.Session) -> SiteConfig:
    """Gather every input and assemble the site config without writing it."""
    tiers = load_tiers(settings.tiers_file)
    rustup = scan_rustup_targets(session, settings.rustup_targets_url, timeout=settings.http_timeout)
    channels = fetch_channels(session, settings.channel_url_prefix, timeout=settings.http_timeout)
    return build_site_config(tiers, rustup, channels)


def generate(settings: SiteSettings, session: requests.Session | None = None) -> SiteConfig:
    """Run the whole pipeline and write ``settings.output_file``.

    Any error aborts before the output file is touched. When *session* is None
    a new one is opened and closed here.
    """
    if session is None:
        with new_session() as own_session:
            config = build_config(settings, own_session)
    else:
        config = build_config(settings, session)
    write_config(config, settings.output_file)
    return config
