"""Pydantic models for ``tiers.yaml``."""

from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel


class Platform(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    tuple: str
    std: str
    rustc: str | None = None
    cargo: str | None = None
    notes: str


class Tier(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    description: str
    platforms: list[Platform]
    footnotes: str


class Tiers(RootModel[dict[str, Tier]]):
    """Tier name -> tier data, in file order."""

    model_config = ConfigDict(frozen=True)

    def dump(self) -> dict[str, Any]:
        # exclude_unset keeps absent rustc/cargo absent, so the output matches the input file.
        return self.model_dump(exclude_unset=True)
