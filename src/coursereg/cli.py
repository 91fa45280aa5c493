"""CLI entry point for coursereg."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from coursereg import __version__
from coursereg.config import (
    CatalogConfig,
    ConfigError,
    build_registry,
    default_config,
    find_config,
    load_config,
)
from coursereg.logging import reset_logging, setup_logging
from coursereg.registry import Registry, RegistryError
from coursereg.shell import Shell, format_course

config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to coursereg.yaml (auto-detected, else the built-in catalog)",
)


def load_catalog(config_path: Path | None) -> tuple[CatalogConfig, Registry]:
    """Load the catalog configuration and build a Registry from it.

    Args:
        config_path: Explicit config file, or None to search for one.

    Returns:
        The configuration and the seeded Registry.

    Raises:
        ConfigError: If the config file is invalid.
        RegistryError: If the catalog has duplicate codes or IDs.
    """
    if config_path is None:
        config_path = find_config()
    config = default_config() if config_path is None else load_config(config_path)
    return config, build_registry(config)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """coursereg - register students for courses from a text menu."""
    pass


@main.command()
@config_option
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for log files (default: $COURSEREG_LOG_DIR or ./logs)",
)
def run(config_path: Path | None, verbose: bool, log_dir: Path | None) -> None:
    """Start the interactive registration menu."""
    setup_logging(log_dir=log_dir, verbose=verbose)
    try:
        config, registry = load_catalog(config_path)
        Shell(registry, title=config.name).run()
    except (ConfigError, RegistryError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    finally:
        reset_logging()


@main.command()
@config_option
def courses(config_path: Path | None) -> None:
    """Print the course catalog and exit."""
    try:
        _, registry = load_catalog(config_path)
    except (ConfigError, RegistryError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    for course in registry.list_courses():
        click.echo(format_course(course))
        click.echo()
