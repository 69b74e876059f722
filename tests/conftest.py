"""Shared fixtures: an in-memory stand-in for requests.Session and sample inputs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import requests

from channel_site.settings import CHANNEL_URL_PREFIX, RUSTUP_TARGETS_URL

TIERS_YAML = """\
tier1:
  description: Guaranteed to work
  platforms:
  - tuple: x86_64-unknown-linux-gnu
    std: full
    rustc: full
    cargo: full
    notes: 64-bit Linux (kernel 3.2+, glibc 2.17+)
  - tuple: i686-pc-windows-msvc
    std: full
    rustc: null
    notes: 32-bit MSVC (Windows 7+)
  footnotes: ''
"""

RUSTUP_LISTING = """\
rustup/release-stable.toml
rustup/dist/x86_64-unknown-linux-gnu/rustup-init
rustup/dist/x86_64-unknown-linux-gnu/rustup-init.sha256
rustup/dist/x86_64-pc-windows-msvc/rustup-init.exe
"""


def manifest_toml(version: str, targets: dict[str, bool]) -> str:
    """Build a minimal channel-rust-*.toml document."""
    lines = [
        'manifest-version = "2"',
        'date = "2024-01-01"',
        "",
        "[pkg.rust]",
        f'version = "{version}"',
        "",
        "[pkg.rust.target]",
    ]
    for target, available in targets.items():
        lines += [
            "",
            f'[pkg.rust.target."{target}"]',
            f"available = {'true' if available else 'false'}",
            f'url = "https://static.rust-lang.org/dist/rust-{target}.tar.gz"',
        ]
    return "\n".join(lines) + "\n"


class FakeResponse:
    def __init__(self, body: str | bytes = b"", status_code: int = 200, fail_while_reading: bool = False) -> None:
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code
        self.fail_while_reading = fail_while_reading
        self.closed = False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def iter_lines(self):
        for line in self.content.splitlines():
            yield line
        if self.fail_while_reading:
            raise requests.ConnectionError("connection reset by peer")

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.closed = True


class FakeSession:
    """Serves canned responses by URL; unknown URLs fail like an unreachable host."""

    def __init__(self, routes: dict[str, FakeResponse | Exception]) -> None:
        self.routes = dict(routes)
        self.requested: list[str] = []
        self.closed = False

    def get(self, url: str, timeout: float | None = None, stream: bool = False) -> FakeResponse:
        self.requested.append(url)
        route = self.routes.get(url)
        if route is None:
            raise requests.ConnectionError(f"Failed to resolve {url}")
        if isinstance(route, Exception):
            raise route
        return route

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def default_routes() -> dict[str, FakeResponse | Exception]:
    return {
        RUSTUP_TARGETS_URL: FakeResponse(RUSTUP_LISTING),
        f"{CHANNEL_URL_PREFIX}stable.toml": FakeResponse(
            manifest_toml("1.75.0 (82e1608df 2023-12-21)", {"x86_64-unknown-linux-gnu": True, "i686-pc-windows-msvc": False})
        ),
        f"{CHANNEL_URL_PREFIX}beta.toml": FakeResponse(
            manifest_toml("1.76.0-beta.5 (f1b4b3c 2024-01-15)", {"x86_64-pc-windows-msvc": True})
        ),
        f"{CHANNEL_URL_PREFIX}nightly.toml": FakeResponse(
            manifest_toml("1.77.0-nightly (d6d7a9386 2024-01-20)", {"aarch64-apple-darwin": True})
        ),
    }


@pytest.fixture()
def fake_session() -> FakeSession:
    return FakeSession(default_routes())


@pytest.fixture()
def tiers_file(tmp_path: Path) -> Path:
    path = tmp_path / "tiers.yaml"
    path.write_text(TIERS_YAML, encoding="utf-8")
    return path
