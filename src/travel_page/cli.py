"""CLI interface for travel-page."""

import logging
import sys

import click

from . import __version__
from .config import get_default_config
from .main import LOG_FORMAT, BuildError, build_travel_page

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="travel-page")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug mode.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """travel-page - build a static travel photo page from trip albums.

    Without a command, builds the page.
    """
    # Ensure ctx.obj exists
    if ctx.obj is None:
        ctx.obj = {}

    # Configure logging
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug

    if debug:
        logger.debug("Debug mode enabled")

    if ctx.invoked_subcommand is None:
        ctx.invoke(build)


@cli.command()
@click.pass_context
def build(ctx: click.Context) -> None:
    """Generate the travel page from the trip directories."""
    config = get_default_config()
    click.echo("Generating travel page...")
    if ctx.obj.get("verbose"):
        click.echo(f"Travel directory: {config.travel_dir}")
        click.echo(f"Template: {config.template_file}")

    try:
        result = build_travel_page(config)
    except BuildError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except OSError as e:
        logger.error(f"Failed to write {config.output_file}: {e}", exc_info=ctx.obj.get("debug"))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(f"Generated {result.output_file} with {len(result.trips)} trip sections")
    for trip in result.trips:
        click.echo(f"  {trip.dir_name}: {trip.photo_count} photos")


@cli.command()
@click.pass_context
def preprocess(ctx: click.Context) -> None:
    """Resize, re-orient and strip the trip photos in place."""
    from .gallery.preprocess import preprocess_photos

    config = get_default_config()
    if not config.travel_dir.is_dir():
        click.echo(f"Error: Travel directory not found: {config.travel_dir}", err=True)
        ctx.exit(1)

    stats = preprocess_photos(config.travel_dir)
    click.echo(
        f"Preprocessing complete: {stats.processed} processed, "
        f"{stats.skipped} skipped, {stats.errors} errors"
    )
    if stats.errors:
        ctx.exit(1)


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display package information and the build paths."""
    import platform
    click.echo(f"travel-page v{__version__}")
    click.echo(f"Python {platform.python_version()} on {platform.system()} {platform.release()}")

    for key, value in get_default_config().to_dict().items():
        click.echo(f"  {key}: {value}")


def main() -> None:
    """Entry point for the CLI."""
    try:
        cli(obj={})
    except Exception as e:
        click.echo(f"Fatal error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
