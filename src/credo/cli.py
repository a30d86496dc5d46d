"""CLI entry point for the Credo enrollment service."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import uvicorn

from credo.config import ConfigError, CredoConfig, find_config, load_config
from credo.logging import setup_logging_from_config
from credo.registry import Collection, SeedDataError, load_seed


def _load(config_path: Path | None) -> CredoConfig:
    """Load configuration from a file, the nearest credo.yaml, or defaults."""
    if config_path is None:
        config_path = find_config()
    if config_path is None:
        return CredoConfig()
    return load_config(config_path)


@click.group()
@click.version_option(package_name="credo")
def main() -> None:
    """Credo - course enrollment records for Credo University."""
    pass


@main.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to credo.yaml (auto-detected if not specified)",
)
@click.option("--host", default=None, help="Bind address (default: from config)")
@click.option("--port", type=int, default=None, help="Bind port (default: from config)")
@click.option("--no-seed", is_flag=True, help="Start with empty tables")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    no_seed: bool,
    verbose: bool,
) -> None:
    """Run the HTTP API server."""
    from credo.api.app import create_app  # noqa: PLC0415

    try:
        config = _load(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    if no_seed:
        config.seed.enabled = False

    setup_logging_from_config(config.logging, verbose=verbose)

    # Surface seed problems before the server starts
    if config.seed.enabled:
        try:
            load_seed(
                config.seed.path,
                student_capacity=config.capacity.student,
                course_capacity=config.capacity.course,
            )
        except SeedDataError as e:
            click.echo(f"Seed data error: {e}", err=True)
            sys.exit(1)

    uvicorn.run(
        create_app(config),
        host=host or config.server.host,
        port=port or config.server.port,
        log_config=None,
    )


@main.command("check-seed")
@click.argument("seed_path", required=False, type=click.Path(exists=True, path_type=Path))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to credo.yaml (auto-detected if not specified)",
)
def check_seed(seed_path: Path | None, config_path: Path | None) -> None:
    """Validate a seed file against the enrollment rules.

    Uses the configured seed file when SEED_PATH is omitted.
    """
    try:
        config = _load(config_path)
        store = load_seed(
            seed_path or config.seed.path,
            student_capacity=config.capacity.student,
            course_capacity=config.capacity.course,
        )
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except SeedDataError as e:
        click.echo(f"Seed data error: {e}", err=True)
        sys.exit(1)

    click.echo("Seed data OK")
    for collection in Collection:
        click.echo(f"  {collection}: {store.count(collection)}")


if __name__ == "__main__":
    main()
