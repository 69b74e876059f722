"""Discover the targets rustup ships an installer for."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

import requests

from channel_site.remote import iter_lines

logger = logging.getLogger(__name__)

_RUSTUP_INIT_RE = re.compile(r"rustup/dist/([^/]+)/rustup-init(?:\.exe)?")


def extract_rustup_targets(lines: Iterable[str]) -> list[str]:
    """Return the target of every ``rustup/dist/<target>/rustup-init[.exe]`` line.

    Targets are kept in line order. A target listed twice (e.g. once with
    ``.exe``) appears twice.
    """
    targets: list[str] = []
    for line in lines:
        m = _RUSTUP_INIT_RE.fullmatch(line)
        if m:
            targets.append(m.group(1))
    return targets


def scan_rustup_targets(session: requests.Session, url: str, timeout: float | None = None) -> list[str]:
    targets = extract_rustup_targets(iter_lines(session, url, timeout=timeout))
    logger.info("Found %d targets for rustup", len(targets))
    return targets
