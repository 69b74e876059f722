import logging

import click

from channel_site.errors import SiteConfigError
from channel_site.pipeline import generate
from channel_site.settings import apply_overrides, load_settings

logger = logging.getLogger("channel_site")


@click.command()
@click.option("--tiers", "tiers_file", type=click.Path(dir_okay=False), help="Tier description YAML. [default: tiers.yaml]")
@click.option("--output", "-o", "output_file", type=click.Path(dir_okay=False), help="Config file to write. [default: _config.yml]")
@click.option("--settings", "settings_file", type=click.Path(exists=True, dir_okay=False), help="Optional settings YAML overriding the built-in sources.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug-level logging.")
def main(tiers_file: str | None, output_file: str | None, settings_file: str | None, verbose: bool) -> None:
    """Generate the Jekyll _config.yml listing Rust channels and platform tiers."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    try:
        settings = apply_overrides(load_settings(settings_file), tiers_file=tiers_file, output_file=output_file)
        generate(settings)
    except (SiteConfigError, OSError) as exc:
        logger.debug("Aborted", exc_info=True)
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Done! Site config written to {settings.output_file}")


if __name__ == "__main__":
    main()
