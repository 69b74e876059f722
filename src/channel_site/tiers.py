"""Load the locally maintained platform tiers."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from channel_site.errors import ParseError
from channel_site.models.tiers import Tiers

logger = logging.getLogger(__name__)


def load_tiers(path: str | Path) -> Tiers:
    """Read *path* into a :class:`Tiers` mapping, unchanged."""
    with open(path, "rb") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ParseError(str(path), str(exc)) from exc

    if not isinstance(raw, dict):
        raise ParseError(str(path), f"expected YAML mapping of tiers (got {type(raw).__name__})")

    try:
        tiers = Tiers.model_validate(raw)
    except ValidationError as exc:
        raise ParseError(str(path), str(exc)) from exc

    logger.debug("Loaded %d tiers from %s", len(tiers.root), path)
    return tiers
