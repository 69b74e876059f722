"""Pydantic models for the ``channel-rust-<name>.toml`` release manifests.

Only the fields the site needs are declared; everything else in the manifest
is ignored.
"""

from pydantic import BaseModel, ConfigDict


class TargetInfo(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    available: bool


class RustPackage(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    version: str
    target: dict[str, TargetInfo]


class Packages(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    rust: RustPackage


class ChannelManifest(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    pkg: Packages
