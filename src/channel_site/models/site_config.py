"""The Jekyll ``_config.yml`` data and its assembly."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from channel_site.models.tiers import Tiers
from channel_site.settings import EXCLUDE


class ChannelSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    vers: str
    platforms: list[str]


class SiteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    exclude: list[str]
    rustup: list[str]
    channels: dict[str, ChannelSummary]
    tiers: Tiers

    def dump(self) -> dict[str, Any]:
        """Plain-data form in output key order, ready for YAML."""
        return {
            "exclude": list(self.exclude),
            "rustup": list(self.rustup),
            "channels": {name: summary.model_dump() for name, summary in self.channels.items()},
            "tiers": self.tiers.dump(),
        }


def build_site_config(
    tiers: Tiers,
    rustup: list[str],
    channels: dict[str, ChannelSummary],
) -> SiteConfig:
    return SiteConfig(
        exclude=list(EXCLUDE),
        rustup=list(rustup),
        channels=dict(channels),
        tiers=tiers,
    )
