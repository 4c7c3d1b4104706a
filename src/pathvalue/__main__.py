"""CLI entry point for pathvalue.

Provides commands for inspecting, traversing and comparing path
strings against a configured workspace.
"""

import locale
from pathlib import Path
from typing import TYPE_CHECKING

import click
from loguru import logger

from pathvalue import __version__

if TYPE_CHECKING:
    from pathvalue.host.local import Host

config_option = click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)


class InvalidPathsError(click.UsageError):
    """Raised for path arguments a command cannot work with."""


def _load_host(config: Path | None) -> "Host":
    from pathvalue.config.loader import load_config
    from pathvalue.host.local import build_host
    from pathvalue.utils.logging import configure_logging

    # Pydantic's ValidationError is a ValueError too
    try:
        cfg = load_config(config)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    configure_logging(cfg.logging)
    return build_host(cfg)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Path string decomposition and traversal.

    Splits paths into directory and fragment, finds parents, roots
    and common prefixes without touching the filesystem.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning("Keeping C collation, environment locale unusable: {}", e)


@cli.command()
@click.argument("path")
@config_option
def inspect(path: str, config: Path | None) -> None:
    """Show how a path is decomposed."""
    from pathvalue.models.path import PathValue

    host = _load_host(config)
    value = PathValue(path, host.platform)

    click.echo(f"full: {value.full}")
    click.echo(f"separator: {value.separator}")
    click.echo(f"directory: {value.directory}")
    click.echo(f"fragment: {value.fragment}")
    click.echo(f"absolute: {value.absolute}")
    click.echo(f"root: {'yes' if value.is_root() else 'no'}")
    in_project = value.is_project_directory(host.workspace)
    click.echo(f"project directory: {'yes' if in_project else 'no'}")
    click.echo(f"case-sensitive fragment: {'yes' if value.has_case_sensitive_fragment() else 'no'}")


@cli.command()
@click.argument("path")
@config_option
def parent(path: str, config: Path | None) -> None:
    """Print the parent directory of PATH."""
    from pathvalue.models.path import PathValue

    host = _load_host(config)
    click.echo(PathValue(path, host.platform).parent().full)


@cli.command()
@click.argument("path")
@config_option
def root(path: str, config: Path | None) -> None:
    """Print the filesystem root PATH lives on."""
    from pathvalue.models.path import PathValue

    host = _load_host(config)
    click.echo(PathValue(path, host.platform).root().full)


@cli.command()
@click.argument("path")
@click.argument("token")
@config_option
def shortcut(path: str, token: str, config: Path | None) -> None:
    """Check whether PATH ends in the TOKEN shortcut.

    Exits with status 1 when it does not.
    """
    from pathvalue.models.path import PathValue

    host = _load_host(config)
    if PathValue(path, host.platform).has_shortcut(token):
        click.echo("yes")
    else:
        click.echo("no")
        click.get_current_context().exit(1)


@cli.command("common-prefix")
@click.argument("paths", nargs=-1)
@click.option(
    "--case-sensitive",
    is_flag=True,
    help="Stop at characters that only differ in case",
)
@config_option
def common_prefix(paths: tuple[str, ...], case_sensitive: bool, config: Path | None) -> None:
    """Print the common prefix of two or more PATHS."""
    from pathvalue.errors import InvalidArgumentError
    from pathvalue.models.path import PathValue

    host = _load_host(config)
    values = [PathValue(path, host.platform) for path in paths]
    try:
        prefix = PathValue.common_prefix(values, case_sensitive=case_sensitive)
    except InvalidArgumentError as e:
        raise InvalidPathsError(str(e)) from e

    click.echo(prefix.full)


@cli.command()
@config_option
def initial(config: Path | None) -> None:
    """Print the initial path for the configured workspace."""
    from pathvalue.models.path import PathValue

    host = _load_host(config)
    click.echo(PathValue.initial(host.workspace, host.preferences, host.platform).full)


@cli.command("sort")
@click.argument("paths", nargs=-1)
@config_option
def sort_command(paths: tuple[str, ...], config: Path | None) -> None:
    """Print PATHS in locale order."""
    from pathvalue.models.path import PathValue, sort_paths

    host = _load_host(config)
    for value in sort_paths(PathValue(path, host.platform) for path in paths):
        click.echo(value.full)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
