"""Write the assembled config as Jekyll ``_config.yml``."""

from __future__ import annotations

import logging
import os

import yaml

from channel_site.errors import EmitError
from channel_site.models.site_config import SiteConfig

logger = logging.getLogger(__name__)


def render_config(config: SiteConfig) -> str:
    try:
        return yaml.safe_dump(config.dump(), default_flow_style=False, sort_keys=False)
    except yaml.YAMLError as exc:
        raise EmitError(f"Could not serialize site config: {exc}") from exc


def write_config(config: SiteConfig, output_path: str | os.PathLike[str]) -> None:
    """Render *config* and write it to *output_path*, replacing any previous file.

    The destination is only opened once rendering succeeded.
    """
    content = render_config(config)
    parent = os.path.dirname(output_path)
    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        raise EmitError(f"Error writing {output_path}: {exc}") from exc
    logger.info("Wrote site config to %s", output_path)
