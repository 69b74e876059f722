"""Generate the Jekyll site config listing Rust channels and platform tiers."""

__version__ = "0.1.0"
